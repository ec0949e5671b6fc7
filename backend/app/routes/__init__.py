# Routes package init
"""
Employee Registry Backend: API Routes Package
================================================

Route Inventory:
    - employees.py:  POST /api/employees            (create with defaults)
                     GET  /api/employees            (list all)
                     GET  /api/employees/{id}       (single employee)
    - health.py:     GET  /health                   (service health check)

Routes stay thin: read the request, call the service, set status and headers.
"""
