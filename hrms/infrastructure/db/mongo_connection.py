"""
MongoDB Connection
==================

Owns the single long-lived MongoDB client for the process.
The manager is constructed explicitly at startup and injected through the
DI container; there is no module-level client.
"""
import logging
from typing import Optional

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import PyMongoError

from hrms.domain.exceptions import DatabaseConnectionError

logger = logging.getLogger(__name__)


class MongoConnectionManager:
    """
    MongoDB client manager.
    
    connect() fails fast if the server cannot be reached within the
    configured timeout. There is no reconnect or health-check logic: once
    connected, later failures surface on the next database call.
    """
    
    def __init__(
        self,
        mongo_uri: Optional[str],
        database_name: str,
        connect_timeout_seconds: float = 10.0,
    ) -> None:
        self._mongo_uri = mongo_uri
        self._database_name = database_name
        self._connect_timeout_ms = int(connect_timeout_seconds * 1000)
        self._client: Optional[MongoClient] = None
        self._database: Optional[Database] = None
    
    @property
    def is_connected(self) -> bool:
        return self._client is not None
    
    def connect(self) -> None:
        """
        Create the client and verify the server is reachable.
        
        Raises:
            DatabaseConnectionError: If MONGO_URI is missing or the server
                does not answer a ping within the timeout
        """
        if self._client is not None:
            return  # Already connected
        
        if not self._mongo_uri:
            raise DatabaseConnectionError("MONGO_URI not set. Please configure it in your .env file.")
        
        client = None
        try:
            client = MongoClient(
                self._mongo_uri,
                serverSelectionTimeoutMS=self._connect_timeout_ms,
            )
            client.admin.command("ping")
        except PyMongoError as e:
            if client is not None:
                client.close()
            logger.error(f"Failed to connect to MongoDB: {e}")
            raise DatabaseConnectionError(f"Could not connect to MongoDB: {e}") from e
        
        self._client = client
        self._database = client[self._database_name]
        logger.info(f"Connected to MongoDB database '{self._database_name}'")
    
    def get_database(self) -> Database:
        """Get MongoDB database instance, connecting on first use."""
        if self._database is None:
            self.connect()
        return self._database
    
    def get_collection(self, collection_name: str) -> Collection:
        """
        Get a MongoDB collection.
        
        Args:
            collection_name: Name of the collection
            
        Returns:
            MongoDB Collection object
        """
        return self.get_database()[collection_name]
    
    def close(self) -> None:
        """Close MongoDB connection."""
        if self._client:
            self._client.close()
            self._client = None
            self._database = None
            logger.info("MongoDB connection closed")
