"""
List Employees Use Case
=======================
"""
from typing import List

from hrms.domain.models.employee import Employee
from hrms.domain.repositories.employee_repository import EmployeeRepository


class ListEmployeesUseCase:
    """Use case for listing every employee record."""
    
    def __init__(self, employee_repository: EmployeeRepository):
        self._repository = employee_repository
    
    def execute(self) -> List[Employee]:
        return self._repository.find_all()
