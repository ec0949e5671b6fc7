# Services package init
"""
Employee Registry Backend: Services Layer
============================================

What:  Business logic between the routes (HTTP) and the record store.
How:   Services take a store and plain Python values, apply the rules, and
       return response models. They never import FastAPI.

Service Inventory:
    - EmployeeService: create (with defaulting), list, and fetch employees
"""
