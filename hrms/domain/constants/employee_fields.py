"""Constants for Employee model field names"""


class EmployeeFields:
    """Field name constants for Employee model"""
    NAME = "name"
    AGE = "age"
    SALARY = "salary"
    
    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
