"""
Get Employee Use Case
=====================
"""
from hrms.domain.models.employee import Employee
from hrms.domain.repositories.employee_repository import EmployeeRepository
from .resolve_id import resolve_employee_id


class GetEmployeeUseCase:
    """Use case for reading a single employee by identifier."""
    
    def __init__(self, employee_repository: EmployeeRepository):
        self._repository = employee_repository
    
    def execute(self, employee_id: str) -> Employee:
        """
        Raises:
            InvalidEmployeeIdError: If the identifier is malformed
            EmployeeNotFoundError: If no record matches
        """
        return self._repository.find_by_id(resolve_employee_id(employee_id))
