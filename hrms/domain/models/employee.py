"""
Employee Model
==============

Domain model representing an employee record.
This is a pure domain object with no infrastructure dependencies.
"""
from dataclasses import dataclass
from typing import Optional, Union

Number = Union[int, float]


@dataclass
class Employee:
    """
    Employee domain model.
    
    The identifier is assigned by the store on creation and never changes
    afterwards. name, age and salary are always overwritten together.
    """
    name: str
    age: Number
    salary: Number
    id: Optional[str] = None
    
    def with_id(self, employee_id: str) -> "Employee":
        """Return a copy of this record annotated with an identifier."""
        return Employee(
            name=self.name,
            age=self.age,
            salary=self.salary,
            id=employee_id,
        )
