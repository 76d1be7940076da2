from typing import TYPE_CHECKING
from ...core.config import Settings
from ...domain.repositories.employee_repository import EmployeeRepository
from ...infrastructure.db.mongo_connection import MongoConnectionManager
from ...infrastructure.db.mongo_employee_repository import MongoEmployeeRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations.
        Gets the collection from the database provider's connection.
        """
        settings = container.get(Settings)
        connection = container.get(MongoConnectionManager)
        
        # Domain interfaces -> Infrastructure implementations
        container.register_singleton(
            EmployeeRepository,
            MongoEmployeeRepository(
                connection.get_collection(settings.employees_collection)
            )
        )
