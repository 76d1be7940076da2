"""
Update Employee Use Case
========================

Business use case for overwriting an existing employee.
"""
from hrms.domain.models.employee import Employee, Number
from hrms.domain.repositories.employee_repository import EmployeeRepository
from .resolve_id import resolve_employee_id


class UpdateEmployeeUseCase:
    """
    Use case for updating an employee.
    
    name, age and salary are overwritten together; there is no partial
    update.
    """
    
    def __init__(self, employee_repository: EmployeeRepository):
        self._repository = employee_repository
    
    def execute(self, employee_id: str, name: str, age: Number, salary: Number) -> Employee:
        """
        Execute the update employee use case.
        
        Args:
            employee_id: Path identifier of the record to update
            name: New name
            age: New age
            salary: New salary
            
        Returns:
            The submitted values annotated with the path identifier
            
        Raises:
            InvalidEmployeeIdError: If the identifier is malformed
            EmployeeNotFoundError: If no record matches
        """
        object_id = resolve_employee_id(employee_id)
        employee = Employee(name=name, age=age, salary=salary)
        self._repository.update(object_id, employee)
        return employee.with_id(employee_id)
