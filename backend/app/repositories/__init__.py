# Repositories package init
"""
Employee Registry Backend: Record Store Layer
================================================

What:  The boundary between business logic and the database.
Why:   EmployeeService is handed a store instead of a session, so it can be
       tested with a fake store and never sees SQLAlchemy exceptions.

Inventory:
    - EmployeeStore (abstract): insert / list_all / get contract
    - EmployeeRepository: SQLAlchemy implementation over one AsyncSession
"""
