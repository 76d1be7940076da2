"""
Employee Service Tests
======================

Use-case behaviour against the in-memory repository.
"""
import pytest
from bson import ObjectId

from hrms.application.services.employee_service import EmployeeService
from hrms.application.use_cases.employee.resolve_id import resolve_employee_id
from hrms.domain.exceptions import EmployeeNotFoundError, InvalidEmployeeIdError


@pytest.fixture
def service(employee_repository):
    return EmployeeService(employee_repository)


class TestResolveEmployeeId:
    
    def test_valid_hex(self):
        object_id = ObjectId()
        
        assert resolve_employee_id(str(object_id)) == object_id
    
    @pytest.mark.parametrize("raw", ["", "abc", "g" * 24, "0123456789abcdef0123456789"])
    def test_invalid(self, raw):
        with pytest.raises(InvalidEmployeeIdError) as exc_info:
            resolve_employee_id(raw)
        
        assert exc_info.value.employee_id == raw


class TestEmployeeService:
    
    def test_list_empty(self, service):
        assert service.list_employees() == []
    
    def test_create_assigns_identifier(self, service):
        employee = service.create_employee(name="Ada", age=30, salary=1000)
        
        assert ObjectId.is_valid(employee.id)
        assert service.list_employees() == [employee]
    
    def test_update_returns_input_annotated_with_path_id(self, service):
        employee_id = service.create_employee(name="Ada", age=30, salary=1000).id
        
        updated = service.update_employee(employee_id, name="Ada", age=31, salary=1200)
        
        assert updated.id == employee_id
        assert (updated.name, updated.age, updated.salary) == ("Ada", 31, 1200)
        assert service.get_employee(employee_id) == updated
    
    def test_update_unknown_id(self, service, employee_repository):
        with pytest.raises(EmployeeNotFoundError):
            service.update_employee(str(ObjectId()), name="X", age=1, salary=1)
        
        assert employee_repository.records == {}
    
    def test_update_malformed_id(self, service):
        with pytest.raises(InvalidEmployeeIdError):
            service.update_employee("nope", name="X", age=1, salary=1)
    
    def test_delete_twice(self, service):
        employee_id = service.create_employee(name="Ada", age=30, salary=1000).id
        
        service.delete_employee(employee_id)
        
        with pytest.raises(EmployeeNotFoundError):
            service.delete_employee(employee_id)
        assert service.list_employees() == []
    
    def test_get_unknown_id(self, service):
        with pytest.raises(EmployeeNotFoundError):
            service.get_employee(str(ObjectId()))
