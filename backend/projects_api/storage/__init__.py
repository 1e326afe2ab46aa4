"""
Storage layer for the projects API.
"""
from .project_store import (
    InvalidProjectError,
    ProjectNotFoundError,
    ProjectStore,
    ProjectStoreError,
    get_project_store,
    project_store,
)

__all__ = [
    'InvalidProjectError',
    'ProjectNotFoundError',
    'ProjectStore',
    'ProjectStoreError',
    'get_project_store',
    'project_store',
]
