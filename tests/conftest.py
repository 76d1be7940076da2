"""
Test Configuration
==================

Shared pytest fixtures. No test needs a running MongoDB: API tests use a
container wired to an in-memory repository, repository tests use mocked
pymongo collections.

Fixtures:
    employee_repository: InMemoryEmployeeRepository, fresh per test
    container:           BaseContainer with the repository and EmployeeService
    client:              TestClient for an app built around `container`
"""
import os
from typing import Dict, List

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

# Keep the test run off any developer database
os.environ.setdefault("MONGO_URI", "mongodb://localhost:1")
os.environ["LOG_LEVEL"] = "WARNING"

from hrms.di.base_container import BaseContainer
from hrms.di.providers import EmployeeProvider
from hrms.domain.exceptions import EmployeeNotFoundError
from hrms.domain.models.employee import Employee
from hrms.domain.repositories.employee_repository import EmployeeRepository
from hrms.main import create_application


class InMemoryEmployeeRepository(EmployeeRepository):
    """Dict-backed EmployeeRepository keyed by ObjectId."""
    
    def __init__(self) -> None:
        self.records: Dict[ObjectId, dict] = {}
    
    def _to_entity(self, object_id: ObjectId) -> Employee:
        return Employee(id=str(object_id), **self.records[object_id])
    
    def find_all(self) -> List[Employee]:
        return [self._to_entity(object_id) for object_id in sorted(self.records)]
    
    def find_by_id(self, employee_id: ObjectId) -> Employee:
        if employee_id not in self.records:
            raise EmployeeNotFoundError(str(employee_id))
        return self._to_entity(employee_id)
    
    def create(self, employee: Employee) -> Employee:
        object_id = ObjectId()
        self.records[object_id] = {
            "name": employee.name,
            "age": employee.age,
            "salary": employee.salary,
        }
        return self._to_entity(object_id)
    
    def update(self, employee_id: ObjectId, employee: Employee) -> None:
        if employee_id not in self.records:
            raise EmployeeNotFoundError(str(employee_id))
        self.records[employee_id] = {
            "name": employee.name,
            "age": employee.age,
            "salary": employee.salary,
        }
    
    def delete(self, employee_id: ObjectId) -> bool:
        return self.records.pop(employee_id, None) is not None


def build_container(repository: EmployeeRepository) -> BaseContainer:
    """Container with the given repository and the real EmployeeService."""
    container = BaseContainer()
    container.register_singleton(EmployeeRepository, repository)
    EmployeeProvider.register(container)
    return container


@pytest.fixture
def employee_repository():
    return InMemoryEmployeeRepository()


@pytest.fixture
def container(employee_repository):
    return build_container(employee_repository)


@pytest.fixture
def client(container):
    """HTTP client for an app that never touches MongoDB."""
    with TestClient(create_application(container)) as test_client:
        yield test_client


@pytest.fixture
def ada():
    return {"name": "Ada", "age": 30, "salary": 1000}
