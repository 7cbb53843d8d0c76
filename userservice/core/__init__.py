"""
Core

Result/Error value types, entity contracts, the repository port and the
generic CRUD helper shared by feature modules.
"""

from .errors import Error, ErrorType, EntityErrors, catalog, define
from .result import Result
from .entity import SoftDeletable
from .repository import Repository
from .crud_service import CrudService

__all__ = [
    "Error",
    "ErrorType",
    "EntityErrors",
    "catalog",
    "define",
    "Result",
    "SoftDeletable",
    "Repository",
    "CrudService",
]
