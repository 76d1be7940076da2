"""
MongoDB Employee Repository
===========================

Concrete implementation of EmployeeRepository using MongoDB.
"""
import logging
from typing import List

from bson import ObjectId
from bson.errors import InvalidDocument
from pymongo import ASCENDING
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from hrms.domain.constants.employee_fields import EmployeeFields
from hrms.domain.exceptions import EmployeeNotFoundError, EmployeeRepositoryError
from hrms.domain.models.employee import Employee
from hrms.domain.repositories.employee_repository import EmployeeRepository

logger = logging.getLogger(__name__)

# Store failures plus BSON encoding failures (e.g. integers beyond 64 bits)
WRITE_ERRORS = (PyMongoError, InvalidDocument, OverflowError)


class MongoEmployeeRepository(EmployeeRepository):
    """
    MongoDB implementation of EmployeeRepository.
    
    Every pymongo failure is re-raised as EmployeeRepositoryError carrying
    the driver's message.
    """
    
    def __init__(self, collection: Collection):
        """
        Initialize repository with the employees collection.
        
        Args:
            collection: Collection handle obtained from the connection manager
        """
        self._collection = collection
    
    def _to_entity(self, doc: dict) -> Employee:
        """Convert MongoDB document to Employee entity."""
        return Employee(
            id=str(doc[EmployeeFields.MONGO_ID]),
            name=doc.get(EmployeeFields.NAME, ""),
            age=doc.get(EmployeeFields.AGE, 0),
            salary=doc.get(EmployeeFields.SALARY, 0),
        )
    
    def _to_document(self, employee: Employee) -> dict:
        """Convert Employee entity to the mutable part of a MongoDB document."""
        return {
            EmployeeFields.NAME: employee.name,
            EmployeeFields.AGE: employee.age,
            EmployeeFields.SALARY: employee.salary,
        }
    
    def find_all(self) -> List[Employee]:
        """Find every employee, oldest first."""
        try:
            docs = list(self._collection.find({}).sort(EmployeeFields.MONGO_ID, ASCENDING))
        except PyMongoError as e:
            logger.error(f"Failed to list employees: {e}")
            raise EmployeeRepositoryError(str(e)) from e
        
        return [self._to_entity(doc) for doc in docs]
    
    def find_by_id(self, employee_id: ObjectId) -> Employee:
        """Find an employee by its identifier."""
        try:
            doc = self._collection.find_one({EmployeeFields.MONGO_ID: employee_id})
        except PyMongoError as e:
            logger.error(f"Failed to read employee {employee_id}: {e}")
            raise EmployeeRepositoryError(str(e)) from e
        
        if not doc:
            raise EmployeeNotFoundError(str(employee_id))
        return self._to_entity(doc)
    
    def create(self, employee: Employee) -> Employee:
        """Insert a new employee and return it as stored."""
        doc = self._to_document(employee)
        doc[EmployeeFields.MONGO_ID] = ObjectId()
        
        try:
            result = self._collection.insert_one(doc)
            created = self._collection.find_one({EmployeeFields.MONGO_ID: result.inserted_id})
        except WRITE_ERRORS as e:
            logger.error(f"Failed to create employee: {e}")
            raise EmployeeRepositoryError(str(e)) from e
        
        if not created:
            raise EmployeeRepositoryError(
                f"Employee '{doc[EmployeeFields.MONGO_ID]}' was not found after insert"
            )
        
        logger.info(f"Created employee {created[EmployeeFields.MONGO_ID]}")
        return self._to_entity(created)
    
    def update(self, employee_id: ObjectId, employee: Employee) -> None:
        """Overwrite name, age and salary of an existing employee."""
        try:
            result = self._collection.update_one(
                {EmployeeFields.MONGO_ID: employee_id},
                {"$set": self._to_document(employee)},
            )
        except WRITE_ERRORS as e:
            logger.error(f"Failed to update employee {employee_id}: {e}")
            raise EmployeeRepositoryError(str(e)) from e
        
        if result.matched_count == 0:
            raise EmployeeNotFoundError(str(employee_id))
        
        logger.info(f"Updated employee {employee_id}")
    
    def delete(self, employee_id: ObjectId) -> bool:
        """Delete an employee."""
        try:
            result = self._collection.delete_one({EmployeeFields.MONGO_ID: employee_id})
        except PyMongoError as e:
            logger.error(f"Failed to delete employee {employee_id}: {e}")
            raise EmployeeRepositoryError(str(e)) from e
        
        if result.deleted_count > 0:
            logger.info(f"Deleted employee {employee_id}")
            return True
        return False
