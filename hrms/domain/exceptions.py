"""
Domain Exceptions
=================

Errors raised by repositories and use cases. The API layer maps each one to
an HTTP status code.
"""


class EmployeeError(Exception):
    """Base class for all employee-related errors."""


class InvalidEmployeeIdError(EmployeeError):
    """Raised when an identifier is not a valid store key."""
    
    def __init__(self, employee_id: str):
        self.employee_id = employee_id
        super().__init__(f"Invalid employee id '{employee_id}'")


class EmployeeNotFoundError(EmployeeError):
    """Raised when no record matches an identifier."""
    
    def __init__(self, employee_id: str):
        self.employee_id = employee_id
        super().__init__(f"Employee '{employee_id}' not found")


class EmployeeRepositoryError(EmployeeError):
    """Raised when the underlying store fails (connection lost, timeout, etc.)."""


class DatabaseConnectionError(EmployeeError):
    """Raised at startup when the store cannot be reached."""
