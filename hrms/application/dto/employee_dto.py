"""
Employee DTO
============

Pydantic models for employee API requests and responses.
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator

from hrms.domain.models.employee import Number

# BSON stores integers as signed 64-bit
INT64_MIN = -2 ** 63
INT64_MAX = 2 ** 63 - 1


class EmployeeRequest(BaseModel):
    """DTO for creating/updating an employee. Unknown fields, including id, are ignored."""
    name: str = Field(..., description="Employee name")
    age: Number = Field(..., description="Employee age")
    salary: Number = Field(..., description="Employee salary")
    
    model_config = ConfigDict(
        allow_inf_nan=False,
        json_schema_extra={
            "example": {
                "name": "Ada",
                "age": 30,
                "salary": 1000
            }
        }
    )
    
    @field_validator("age", "salary")
    @classmethod
    def fits_in_int64(cls, value: Number) -> Number:
        """Reject integers the store cannot encode."""
        if isinstance(value, int) and not INT64_MIN <= value <= INT64_MAX:
            raise ValueError("integer out of 64-bit range")
        return value


class EmployeeResponse(BaseModel):
    """DTO for employee data."""
    id: str
    name: str
    age: Number
    salary: Number
    
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "6528f1e2a3b4c5d6e7f80912",
                "name": "Ada",
                "age": 30,
                "salary": 1000
            }
        }
    )
