"""Users API routes — directory, profile and bookmarks."""

from typing import List

from fastapi import APIRouter, Depends

from ponsectors.application.services import collaboration_service, user_service
from ponsectors.application.services.access_policy import Actor
from ponsectors.domain.repositories.store import DataStore
from ponsectors.domain.schemas.auth import User, UserProfileUpdate
from ponsectors.domain.schemas.project import Project
from ponsectors.interfaces.api.deps import get_current_actor
from ponsectors.interfaces.deps import get_store

router = APIRouter(prefix="/api/users", tags=["Users"])


@router.get("", response_model=List[User])
def list_users(
    store: DataStore = Depends(get_store),
    actor: Actor = Depends(get_current_actor),
):
    return user_service.list_users(store)


@router.patch("/me", response_model=User)
def update_me(
    body: UserProfileUpdate,
    store: DataStore = Depends(get_store),
    actor: Actor = Depends(get_current_actor),
):
    return user_service.update_profile(store, actor, body)


@router.get("/me/saved", response_model=List[Project])
def list_saved_projects(
    store: DataStore = Depends(get_store),
    actor: Actor = Depends(get_current_actor),
):
    return collaboration_service.list_saved(store, actor)


@router.post("/me/saved/{project_id}", response_model=User)
def toggle_saved_project(
    project_id: str,
    store: DataStore = Depends(get_store),
    actor: Actor = Depends(get_current_actor),
):
    return collaboration_service.toggle_save(store, actor, project_id)


@router.get("/{user_id}", response_model=User)
def get_user(
    user_id: str,
    store: DataStore = Depends(get_store),
    actor: Actor = Depends(get_current_actor),
):
    return user_service.get_user(store, user_id)
