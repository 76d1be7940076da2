"""
Delete Employee Use Case
========================
"""
from hrms.domain.exceptions import EmployeeNotFoundError
from hrms.domain.repositories.employee_repository import EmployeeRepository
from .resolve_id import resolve_employee_id


class DeleteEmployeeUseCase:
    """Use case for permanently removing an employee."""
    
    def __init__(self, employee_repository: EmployeeRepository):
        self._repository = employee_repository
    
    def execute(self, employee_id: str) -> None:
        """
        Raises:
            InvalidEmployeeIdError: If the identifier is malformed
            EmployeeNotFoundError: If nothing was deleted
        """
        if not self._repository.delete(resolve_employee_id(employee_id)):
            raise EmployeeNotFoundError(employee_id)
