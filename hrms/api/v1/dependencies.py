"""
Dependency Resolution
=====================

FastAPI dependencies that resolve services from the DI container stored on
the application at startup.
"""
from fastapi import Request

from hrms.application.services.employee_service import EmployeeService
from hrms.di.base_container import BaseContainer


def get_container(request: Request) -> BaseContainer:
    """
    Get the DI container attached to the running application.
    
    Returns:
        Container built at startup (or injected by the caller)
    """
    return request.app.state.container


def get_employee_service(request: Request) -> EmployeeService:
    """
    Get employee service instance (singleton).
    
    Returns:
        EmployeeService instance
    """
    return get_container(request).get(EmployeeService)
