"""
In-memory project store.
Owns the project collection and implements the list/create/update/delete operations.
"""
import logging
import threading
import uuid
from typing import Any, List, Optional

from ..schemas import Project

logger = logging.getLogger(__name__)


class ProjectStoreError(Exception):
    """Base error for project store operations."""

    status_code = 500
    message = "Project store error"

    def __init__(self, project_id: Optional[str] = None):
        super().__init__(self.message)
        self.project_id = project_id


class ProjectNotFoundError(ProjectStoreError):
    status_code = 404
    message = "Project not found"


class InvalidProjectError(ProjectStoreError):
    status_code = 400
    message = "Name and owner are required"


class ProjectStore:
    """Ordered in-memory collection of projects, guarded by a single lock."""

    def __init__(self):
        self._projects: List[Project] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._projects)

    def _index_of(self, project_id: str) -> int:
        for index, project in enumerate(self._projects):
            if project.id == project_id:
                return index
        return -1

    def _new_id(self) -> str:
        existing = {p.id for p in self._projects}
        while True:
            project_id = str(uuid.uuid4())
            if project_id not in existing:
                return project_id

    def list(self) -> List[Project]:
        """Return copies of all projects in insertion order."""
        with self._lock:
            return [p.model_copy(deep=True) for p in self._projects]

    def create(self, name: Any, owner: Any) -> Project:
        """
        Append a new project and return it.

        No validation is done here: name and owner are stored as given.
        """
        with self._lock:
            project = Project(id=self._new_id(), name=name, owner=owner)
            self._projects.append(project)
            logger.info(f"Project created: {project.id}. Total: {len(self._projects)}")
            return project.model_copy(deep=True)

    def update(self, project_id: str, name: Any, owner: Any) -> Project:
        """
        Replace name and owner of an existing project, keeping its id and position.

        Raises:
            ProjectNotFoundError: no project has this id (checked first)
            InvalidProjectError: name or owner is empty or missing
        """
        with self._lock:
            index = self._index_of(project_id)
            if index < 0:
                raise ProjectNotFoundError(project_id)
            if not name or not owner:
                raise InvalidProjectError(project_id)

            project = Project(id=project_id, name=name, owner=owner)
            self._projects[index] = project
            logger.info(f"Project updated: {project_id}")
            return project.model_copy(deep=True)

    def delete(self, project_id: str) -> None:
        with self._lock:
            index = self._index_of(project_id)
            if index < 0:
                raise ProjectNotFoundError(project_id)
            del self._projects[index]
            logger.info(f"Project deleted: {project_id}. Total: {len(self._projects)}")

    def clear(self) -> None:
        """Drop every project (used to reset state between tests)."""
        with self._lock:
            self._projects.clear()


# Global store instance shared by the API routers
project_store = ProjectStore()


def get_project_store() -> ProjectStore:
    """FastAPI dependency returning the process-wide store."""
    return project_store
