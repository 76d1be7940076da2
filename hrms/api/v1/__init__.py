"""
API v1 Package
===============

Version 1 API controllers.
"""
from .employee_controller import router as employee_router

__all__ = ["employee_router"]
