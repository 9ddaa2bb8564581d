"""Insights API routes."""

from typing import List

from fastapi import APIRouter, Depends, status

from ponsectors.application.services import content_service
from ponsectors.application.services.access_policy import Actor
from ponsectors.domain.enums import ContentKind
from ponsectors.domain.repositories.store import DataStore
from ponsectors.domain.schemas.insight import Insight, InsightCreate, InsightUpdate
from ponsectors.interfaces.api.deps import get_current_actor
from ponsectors.interfaces.deps import get_store

router = APIRouter(prefix="/api/insights", tags=["Insights"])


@router.get("", response_model=List[Insight])
def list_insights(
    store: DataStore = Depends(get_store),
    actor: Actor = Depends(get_current_actor),
):
    return content_service.list_visible(store, actor, ContentKind.INSIGHT)


@router.get("/mine", response_model=List[Insight])
def my_insights(
    store: DataStore = Depends(get_store),
    actor: Actor = Depends(get_current_actor),
):
    return content_service.list_owned(store, actor, ContentKind.INSIGHT)


@router.post("", response_model=Insight, status_code=status.HTTP_201_CREATED)
def create_insight(
    body: InsightCreate,
    store: DataStore = Depends(get_store),
    actor: Actor = Depends(get_current_actor),
):
    return content_service.create_insight(store, actor, body)


@router.get("/{insight_id}", response_model=Insight)
def get_insight(
    insight_id: str,
    store: DataStore = Depends(get_store),
    actor: Actor = Depends(get_current_actor),
):
    return content_service.get_visible(store, actor, ContentKind.INSIGHT, insight_id)


@router.patch("/{insight_id}", response_model=Insight)
def update_insight(
    insight_id: str,
    body: InsightUpdate,
    store: DataStore = Depends(get_store),
    actor: Actor = Depends(get_current_actor),
):
    return content_service.update_content(store, actor, ContentKind.INSIGHT, insight_id, body)


@router.post("/{insight_id}/submit", response_model=Insight)
def submit_insight(
    insight_id: str,
    store: DataStore = Depends(get_store),
    actor: Actor = Depends(get_current_actor),
):
    return content_service.submit_content(store, actor, ContentKind.INSIGHT, insight_id)


@router.delete("/{insight_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_insight(
    insight_id: str,
    store: DataStore = Depends(get_store),
    actor: Actor = Depends(get_current_actor),
):
    content_service.delete_content(store, actor, ContentKind.INSIGHT, insight_id)
