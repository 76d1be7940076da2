"""
MongoDB Employee Repository Tests
=================================

Uses MagicMock collections to simulate pymongo results and failures.
"""
from unittest.mock import MagicMock, patch

import pytest
from bson import ObjectId
from bson.errors import InvalidDocument
from pymongo import ASCENDING
from pymongo.errors import AutoReconnect, ServerSelectionTimeoutError

from hrms.domain.exceptions import EmployeeNotFoundError, EmployeeRepositoryError
from hrms.domain.models.employee import Employee
from hrms.infrastructure.db.mongo_employee_repository import MongoEmployeeRepository


@pytest.fixture
def collection():
    return MagicMock()


@pytest.fixture
def repository(collection):
    return MongoEmployeeRepository(collection)


def _doc(object_id=None, name="Ada", age=30, salary=1000):
    return {"_id": object_id or ObjectId(), "name": name, "age": age, "salary": salary}


class TestFindAll:
    
    def test_maps_documents_in_id_order(self, repository, collection):
        docs = [_doc(), _doc(name="Bo")]
        collection.find.return_value.sort.return_value = iter(docs)
        
        employees = repository.find_all()
        
        collection.find.assert_called_once_with({})
        collection.find.return_value.sort.assert_called_once_with("_id", ASCENDING)
        assert [e.name for e in employees] == ["Ada", "Bo"]
        assert employees[0].id == str(docs[0]["_id"])
    
    def test_empty_collection(self, repository, collection):
        collection.find.return_value.sort.return_value = iter([])
        
        assert repository.find_all() == []
    
    def test_query_failure_skips_decoding(self, repository, collection):
        collection.find.side_effect = ServerSelectionTimeoutError("no servers")
        
        with patch.object(repository, "_to_entity") as to_entity:
            with pytest.raises(EmployeeRepositoryError, match="no servers"):
                repository.find_all()
        
        to_entity.assert_not_called()
    
    def test_cursor_failure_skips_decoding(self, repository, collection):
        def failing_cursor():
            yield _doc()
            raise AutoReconnect("connection reset")
        
        collection.find.return_value.sort.return_value = failing_cursor()
        
        with patch.object(repository, "_to_entity") as to_entity:
            with pytest.raises(EmployeeRepositoryError):
                repository.find_all()
        
        to_entity.assert_not_called()


class TestFindById:
    
    def test_found(self, repository, collection):
        object_id = ObjectId()
        collection.find_one.return_value = _doc(object_id)
        
        employee = repository.find_by_id(object_id)
        
        collection.find_one.assert_called_once_with({"_id": object_id})
        assert employee == Employee(id=str(object_id), name="Ada", age=30, salary=1000)
    
    def test_missing(self, repository, collection):
        collection.find_one.return_value = None
        
        with pytest.raises(EmployeeNotFoundError):
            repository.find_by_id(ObjectId())


class TestCreate:
    
    def test_inserts_with_generated_id_and_rereads(self, repository, collection):
        def insert_one(doc):
            collection.find_one.return_value = dict(doc)
            return MagicMock(inserted_id=doc["_id"])
        
        collection.insert_one.side_effect = insert_one
        
        created = repository.create(Employee(name="Ada", age=30, salary=1000, id="client-id"))
        
        inserted = collection.insert_one.call_args[0][0]
        assert isinstance(inserted["_id"], ObjectId)
        assert created.id == str(inserted["_id"])
        assert created.id != "client-id"
        collection.find_one.assert_called_once_with({"_id": inserted["_id"]})
    
    def test_insert_failure(self, repository, collection):
        collection.insert_one.side_effect = AutoReconnect("gone")
        
        with pytest.raises(EmployeeRepositoryError):
            repository.create(Employee(name="Ada", age=30, salary=1000))
        
        collection.find_one.assert_not_called()
    
    @pytest.mark.parametrize("error", [
        OverflowError("MongoDB can only handle up to 8-byte ints"),
        InvalidDocument("cannot encode object"),
    ])
    def test_unencodable_document_is_repository_error(self, repository, collection, error):
        collection.insert_one.side_effect = error
        
        with pytest.raises(EmployeeRepositoryError):
            repository.create(Employee(name="Ada", age=30, salary=10 ** 20))
        
        collection.find_one.assert_not_called()
    
    def test_missing_after_insert(self, repository, collection):
        collection.insert_one.return_value = MagicMock(inserted_id=ObjectId())
        collection.find_one.return_value = None
        
        with pytest.raises(EmployeeRepositoryError):
            repository.create(Employee(name="Ada", age=30, salary=1000))


class TestUpdate:
    
    def test_sets_all_mutable_fields(self, repository, collection):
        object_id = ObjectId()
        collection.update_one.return_value = MagicMock(matched_count=1)
        
        assert repository.update(object_id, Employee(name="Ada", age=31, salary=1200)) is None
        
        collection.update_one.assert_called_once_with(
            {"_id": object_id},
            {"$set": {"name": "Ada", "age": 31, "salary": 1200}},
        )
    
    def test_same_values_still_count_as_match(self, repository, collection):
        collection.update_one.return_value = MagicMock(matched_count=1, modified_count=0)
        
        repository.update(ObjectId(), Employee(name="Ada", age=31, salary=1200))
    
    def test_no_match_is_not_found(self, repository, collection):
        collection.update_one.return_value = MagicMock(matched_count=0)
        
        with pytest.raises(EmployeeNotFoundError):
            repository.update(ObjectId(), Employee(name="Ada", age=31, salary=1200))
    
    def test_store_failure(self, repository, collection):
        collection.update_one.side_effect = AutoReconnect("gone")
        
        with pytest.raises(EmployeeRepositoryError):
            repository.update(ObjectId(), Employee(name="Ada", age=31, salary=1200))
    
    def test_unencodable_value_is_repository_error(self, repository, collection):
        collection.update_one.side_effect = OverflowError("MongoDB can only handle up to 8-byte ints")
        
        with pytest.raises(EmployeeRepositoryError, match="8-byte ints"):
            repository.update(ObjectId(), Employee(name="Ada", age=31, salary=10 ** 20))


class TestDelete:
    
    def test_deleted(self, repository, collection):
        object_id = ObjectId()
        collection.delete_one.return_value = MagicMock(deleted_count=1)
        
        assert repository.delete(object_id) is True
        collection.delete_one.assert_called_once_with({"_id": object_id})
    
    def test_nothing_deleted(self, repository, collection):
        collection.delete_one.return_value = MagicMock(deleted_count=0)
        
        assert repository.delete(ObjectId()) is False
    
    def test_store_failure(self, repository, collection):
        collection.delete_one.side_effect = AutoReconnect("gone")
        
        with pytest.raises(EmployeeRepositoryError):
            repository.delete(ObjectId())
