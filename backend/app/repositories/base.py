"""
Employee Registry Backend: Abstract Record Store Interface
=============================================================

What:  The contract EmployeeService relies on for persistence.
How:   Concrete stores subclass EmployeeStore. The production implementation
       is EmployeeRepository (SQLAlchemy); tests substitute AsyncMock objects
       built with spec=EmployeeStore.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from app.models.employee import Employee


class EmployeeStore(ABC):
    """
    Persistent collection of Employee records.

    Contract:
        - Every failure originating from the backing database is raised as
          DatabaseError; callers never see driver or ORM exceptions
        - No transactional guarantees beyond single-row atomicity of insert
        - Stores hold no state between requests other than their session
    """

    @abstractmethod
    async def insert(self, employee: Employee) -> Employee:
        """
        Persist a new employee.

        Returns:
            The same instance with its store-assigned `id` populated.

        Raises:
            DatabaseError: Store unreachable or the insert was rejected
                (constraint violation, timeout).
        """
        ...

    @abstractmethod
    async def list_all(self) -> List[Employee]:
        """
        Every stored employee, ordered by id.

        Returns an empty list for an empty store.

        Raises:
            DatabaseError: Store unreachable.
        """
        ...

    @abstractmethod
    async def get(self, employee_id: int) -> Optional[Employee]:
        """One employee by id, or None when no such row exists."""
        ...
