"""
Employee Repository Interface
=============================

Abstract interface for employee data access.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import List

from bson import ObjectId

from hrms.domain.models.employee import Employee


class EmployeeRepository(ABC):
    """
    Abstract repository for employee persistence operations.
    
    Every method issues a single operation against the store (create issues
    an insert followed by a re-read). Store failures are raised as
    EmployeeRepositoryError.
    """
    
    @abstractmethod
    def find_all(self) -> List[Employee]:
        """
        Find every employee record.
        
        Returns:
            List of employee entities, empty if the collection is empty
        """
        pass
    
    @abstractmethod
    def find_by_id(self, employee_id: ObjectId) -> Employee:
        """
        Find an employee by identifier.
        
        Args:
            employee_id: Resolved store identifier
            
        Returns:
            Employee entity
            
        Raises:
            EmployeeNotFoundError: If no record matches
        """
        pass
    
    @abstractmethod
    def create(self, employee: Employee) -> Employee:
        """
        Insert a new employee under a freshly generated identifier.
        
        Any identifier already set on the entity is ignored.
        
        Args:
            employee: Employee entity to create
            
        Returns:
            The record as re-read from the store
        """
        pass
    
    @abstractmethod
    def update(self, employee_id: ObjectId, employee: Employee) -> None:
        """
        Overwrite name, age and salary of an existing employee.
        
        Args:
            employee_id: Resolved store identifier
            employee: Entity carrying the new values
            
        Raises:
            EmployeeNotFoundError: If no record matches
        """
        pass
    
    @abstractmethod
    def delete(self, employee_id: ObjectId) -> bool:
        """
        Delete an employee.
        
        Args:
            employee_id: Resolved store identifier
            
        Returns:
            True if a record was deleted, False if none matched
        """
        pass
