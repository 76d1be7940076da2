"""Conversion of path identifiers into store keys."""
from bson import ObjectId
from bson.errors import InvalidId

from hrms.domain.exceptions import InvalidEmployeeIdError


def resolve_employee_id(employee_id: str) -> ObjectId:
    """
    Resolve a path identifier into a MongoDB ObjectId.
    
    Args:
        employee_id: 24 character hex string
        
    Returns:
        ObjectId for the identifier
        
    Raises:
        InvalidEmployeeIdError: If the string is not a valid ObjectId
    """
    try:
        return ObjectId(employee_id)
    except (InvalidId, TypeError) as e:
        raise InvalidEmployeeIdError(employee_id) from e
