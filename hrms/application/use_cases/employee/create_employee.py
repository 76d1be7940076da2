"""
Create Employee Use Case
========================

Business use case for registering a new employee.
"""
from hrms.domain.models.employee import Employee, Number
from hrms.domain.repositories.employee_repository import EmployeeRepository


class CreateEmployeeUseCase:
    """
    Use case for creating an employee.
    
    The store always assigns the identifier. An identifier supplied by the
    client is dropped rather than rejected.
    """
    
    def __init__(self, employee_repository: EmployeeRepository):
        """
        Initialize use case with repository.
        
        Args:
            employee_repository: Repository for employee persistence
        """
        self._repository = employee_repository
    
    def execute(self, name: str, age: Number, salary: Number) -> Employee:
        """
        Execute the create employee use case.
        
        Args:
            name: Employee name
            age: Employee age
            salary: Employee salary
            
        Returns:
            Created employee, as re-read from the store
        """
        return self._repository.create(Employee(name=name, age=age, salary=salary))
