"""Comments API routes — threaded discussion on projects and insights."""

from typing import List

from fastapi import APIRouter, Depends, status

from ponsectors.application.services import comment_service
from ponsectors.application.services.access_policy import Actor
from ponsectors.domain.enums import ContentKind
from ponsectors.domain.repositories.store import DataStore
from ponsectors.domain.schemas.comment import Comment, CommentCreate, CommentNode
from ponsectors.interfaces.api.deps import get_current_actor
from ponsectors.interfaces.deps import get_store

router = APIRouter(prefix="/api/comments", tags=["Comments"])


@router.get("", response_model=List[Comment])
def list_comments(
    parent_id: str,
    parent_kind: ContentKind = ContentKind.PROJECT,
    store: DataStore = Depends(get_store),
    actor: Actor = Depends(get_current_actor),
):
    """Flat list in creation order."""
    return comment_service.list_comments(store, actor, parent_kind, parent_id)


@router.get("/tree", response_model=List[CommentNode])
def comment_tree(
    parent_id: str,
    parent_kind: ContentKind = ContentKind.PROJECT,
    store: DataStore = Depends(get_store),
    actor: Actor = Depends(get_current_actor),
):
    return comment_service.get_comment_tree(store, actor, parent_kind, parent_id)


@router.post("", response_model=Comment, status_code=status.HTTP_201_CREATED)
def add_comment(
    body: CommentCreate,
    store: DataStore = Depends(get_store),
    actor: Actor = Depends(get_current_actor),
):
    return comment_service.add_comment(store, actor, body)


@router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_comment(
    comment_id: str,
    store: DataStore = Depends(get_store),
    actor: Actor = Depends(get_current_actor),
):
    comment_service.delete_comment(store, actor, comment_id)
