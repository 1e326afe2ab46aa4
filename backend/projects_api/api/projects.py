from fastapi import APIRouter, Body, Depends, Response
from typing import Any, Dict, List, Optional

from ..schemas import ErrorResponse, Project
from ..storage import ProjectStore, get_project_store

router = APIRouter(prefix="/projects", tags=["projects"])

NOT_FOUND = {404: {"model": ErrorResponse}}


@router.get("", response_model=List[Project])
async def list_projects(store: ProjectStore = Depends(get_project_store)):
    """Return every project in insertion order."""
    return store.list()


@router.post("", response_model=Project, status_code=201)
async def create_project(
    payload: Optional[Dict[str, Any]] = Body(default=None),
    store: ProjectStore = Depends(get_project_store),
):
    payload = payload or {}
    return store.create(payload.get("name"), payload.get("owner"))


@router.put(
    "/{project_id}",
    response_model=Project,
    responses={**NOT_FOUND, 400: {"model": ErrorResponse}},
)
async def update_project(
    project_id: str,
    payload: Optional[Dict[str, Any]] = Body(default=None),
    store: ProjectStore = Depends(get_project_store),
):
    """
    Replace name and owner of a project.

    The body is passed through untyped so the store alone decides between
    404 (unknown id, checked first) and 400 (missing name or owner).
    """
    payload = payload or {}
    return store.update(project_id, payload.get("name"), payload.get("owner"))


@router.delete("/{project_id}", status_code=204, responses=NOT_FOUND)
async def delete_project(project_id: str, store: ProjectStore = Depends(get_project_store)):
    store.delete(project_id)
    return Response(status_code=204)
