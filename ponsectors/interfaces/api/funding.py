"""Funding opportunity API routes — Premium/Admin posting."""

from typing import List

from fastapi import APIRouter, Depends, status

from ponsectors.application.services import content_service
from ponsectors.application.services.access_policy import Actor
from ponsectors.domain.enums import ContentKind
from ponsectors.domain.repositories.store import DataStore
from ponsectors.domain.schemas.funding import FundingCreate, FundingOpportunity, FundingUpdate
from ponsectors.interfaces.api.deps import get_current_actor
from ponsectors.interfaces.deps import get_store

router = APIRouter(prefix="/api/funding", tags=["Funding"])


@router.get("", response_model=List[FundingOpportunity])
def list_funding(
    store: DataStore = Depends(get_store),
    actor: Actor = Depends(get_current_actor),
):
    return content_service.list_visible(store, actor, ContentKind.FUNDING)


@router.get("/mine", response_model=List[FundingOpportunity])
def my_funding(
    store: DataStore = Depends(get_store),
    actor: Actor = Depends(get_current_actor),
):
    return content_service.list_owned(store, actor, ContentKind.FUNDING)


@router.post("", response_model=FundingOpportunity, status_code=status.HTTP_201_CREATED)
def create_funding(
    body: FundingCreate,
    store: DataStore = Depends(get_store),
    actor: Actor = Depends(get_current_actor),
):
    return content_service.create_funding(store, actor, body)


@router.get("/{funding_id}", response_model=FundingOpportunity)
def get_funding(
    funding_id: str,
    store: DataStore = Depends(get_store),
    actor: Actor = Depends(get_current_actor),
):
    return content_service.get_visible(store, actor, ContentKind.FUNDING, funding_id)


@router.patch("/{funding_id}", response_model=FundingOpportunity)
def update_funding(
    funding_id: str,
    body: FundingUpdate,
    store: DataStore = Depends(get_store),
    actor: Actor = Depends(get_current_actor),
):
    return content_service.update_content(store, actor, ContentKind.FUNDING, funding_id, body)


@router.post("/{funding_id}/submit", response_model=FundingOpportunity)
def submit_funding(
    funding_id: str,
    store: DataStore = Depends(get_store),
    actor: Actor = Depends(get_current_actor),
):
    return content_service.submit_content(store, actor, ContentKind.FUNDING, funding_id)


@router.delete("/{funding_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_funding(
    funding_id: str,
    store: DataStore = Depends(get_store),
    actor: Actor = Depends(get_current_actor),
):
    content_service.delete_content(store, actor, ContentKind.FUNDING, funding_id)
