"""
Employee Service
================

Application service that coordinates employee-related operations.
This service orchestrates the employee use cases.
"""
from typing import List

from hrms.domain.models.employee import Employee, Number
from hrms.domain.repositories.employee_repository import EmployeeRepository
from hrms.application.use_cases.employee import (
    ListEmployeesUseCase,
    GetEmployeeUseCase,
    CreateEmployeeUseCase,
    UpdateEmployeeUseCase,
    DeleteEmployeeUseCase,
)


class EmployeeService:
    """
    Application service for employee operations.
    
    This service coordinates multiple use cases and provides
    a high-level interface for employee management.
    """
    
    def __init__(self, employee_repository: EmployeeRepository):
        """
        Initialize service with repository.
        
        Args:
            employee_repository: Repository for employee persistence
        """
        self._repository = employee_repository
        self._list_use_case = ListEmployeesUseCase(employee_repository)
        self._get_use_case = GetEmployeeUseCase(employee_repository)
        self._create_use_case = CreateEmployeeUseCase(employee_repository)
        self._update_use_case = UpdateEmployeeUseCase(employee_repository)
        self._delete_use_case = DeleteEmployeeUseCase(employee_repository)
    
    def list_employees(self) -> List[Employee]:
        """
        List every employee.
        
        Returns:
            List of employee entities (empty if there are none)
        """
        return self._list_use_case.execute()
    
    def get_employee(self, employee_id: str) -> Employee:
        """
        Get an employee by ID.
        
        Args:
            employee_id: Employee identifier from the request path
            
        Returns:
            Employee entity
        """
        return self._get_use_case.execute(employee_id)
    
    def create_employee(self, name: str, age: Number, salary: Number) -> Employee:
        """
        Create an employee under a new store-assigned identifier.
        
        Returns:
            Created employee entity
        """
        return self._create_use_case.execute(name=name, age=age, salary=salary)
    
    def update_employee(self, employee_id: str, name: str, age: Number, salary: Number) -> Employee:
        """
        Overwrite name, age and salary of an employee.
        
        Args:
            employee_id: Employee identifier from the request path
            
        Returns:
            Updated employee entity
        """
        return self._update_use_case.execute(employee_id, name=name, age=age, salary=salary)
    
    def delete_employee(self, employee_id: str) -> None:
        """
        Delete an employee.
        
        Args:
            employee_id: Employee identifier from the request path
        """
        self._delete_use_case.execute(employee_id)
