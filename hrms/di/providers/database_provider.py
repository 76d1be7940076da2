from typing import TYPE_CHECKING
from ...core.config import Settings
from ...infrastructure.db.mongo_connection import MongoConnectionManager

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for the DB connection"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Connect to MongoDB and register the connection manager.
        This is the ONLY place where the database connection is created.
        
        Raises:
            DatabaseConnectionError: If the server cannot be reached
        """
        settings = container.get(Settings)
        
        connection = MongoConnectionManager(
            mongo_uri=settings.mongo_uri,
            database_name=settings.mongo_database_name,
            connect_timeout_seconds=settings.mongo_connect_timeout_seconds,
        )
        connection.connect()
        
        container.register_singleton(MongoConnectionManager, connection)
