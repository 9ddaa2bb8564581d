"""Projects API routes — portfolio, submissions, collaboration."""

from typing import List, Optional

from fastapi import APIRouter, Depends, status

from ponsectors.application.services import collaboration_service, content_service
from ponsectors.application.services.access_policy import Actor
from ponsectors.domain.enums import ContentKind
from ponsectors.domain.repositories.store import DataStore
from ponsectors.domain.schemas.project import (
    InviteRequest,
    JoinRequestResult,
    Project,
    ProjectCreate,
    ProjectUpdate,
)
from ponsectors.interfaces.api.deps import get_current_actor
from ponsectors.interfaces.deps import get_store

router = APIRouter(prefix="/api/projects", tags=["Projects"])


@router.get("", response_model=List[Project])
def list_projects(
    thematic_area: Optional[str] = None,
    country: Optional[str] = None,
    store: DataStore = Depends(get_store),
    actor: Actor = Depends(get_current_actor),
):
    return collaboration_service.list_projects(store, actor, thematic_area, country)


@router.get("/portfolio", response_model=List[Project])
def portfolio(
    thematic_area: Optional[str] = None,
    country: Optional[str] = None,
    store: DataStore = Depends(get_store),
    actor: Actor = Depends(get_current_actor),
):
    return collaboration_service.list_portfolio(store, actor, thematic_area, country)


@router.get("/mine", response_model=List[Project])
def my_projects(
    store: DataStore = Depends(get_store),
    actor: Actor = Depends(get_current_actor),
):
    return content_service.list_owned(store, actor, ContentKind.PROJECT)


@router.get("/joined", response_model=List[Project])
def joined_projects(
    store: DataStore = Depends(get_store),
    actor: Actor = Depends(get_current_actor),
):
    return collaboration_service.list_joined(store, actor)


@router.post("", response_model=Project, status_code=status.HTTP_201_CREATED)
def create_project(
    body: ProjectCreate,
    store: DataStore = Depends(get_store),
    actor: Actor = Depends(get_current_actor),
):
    return content_service.create_project(store, actor, body)


@router.get("/{project_id}", response_model=Project)
def get_project(
    project_id: str,
    store: DataStore = Depends(get_store),
    actor: Actor = Depends(get_current_actor),
):
    return content_service.get_visible(store, actor, ContentKind.PROJECT, project_id)


@router.patch("/{project_id}", response_model=Project)
def update_project(
    project_id: str,
    body: ProjectUpdate,
    store: DataStore = Depends(get_store),
    actor: Actor = Depends(get_current_actor),
):
    return content_service.update_content(store, actor, ContentKind.PROJECT, project_id, body)


@router.post("/{project_id}/submit", response_model=Project)
def submit_project(
    project_id: str,
    store: DataStore = Depends(get_store),
    actor: Actor = Depends(get_current_actor),
):
    return content_service.submit_content(store, actor, ContentKind.PROJECT, project_id)


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_project(
    project_id: str,
    store: DataStore = Depends(get_store),
    actor: Actor = Depends(get_current_actor),
):
    content_service.delete_content(store, actor, ContentKind.PROJECT, project_id)


@router.post("/{project_id}/join-requests", response_model=JoinRequestResult)
def request_to_join(
    project_id: str,
    store: DataStore = Depends(get_store),
    actor: Actor = Depends(get_current_actor),
):
    return collaboration_service.request_to_join(store, actor, project_id)


@router.post("/{project_id}/collaborators", response_model=Project)
def invite_collaborator(
    project_id: str,
    body: InviteRequest,
    store: DataStore = Depends(get_store),
    actor: Actor = Depends(get_current_actor),
):
    return collaboration_service.invite_collaborator(store, actor, project_id, body.email)
