"""Home feed API route."""

from typing import List

from fastapi import APIRouter, Depends

from ponsectors.application.services import content_service
from ponsectors.application.services.access_policy import Actor
from ponsectors.domain.repositories.store import DataStore
from ponsectors.domain.schemas.feed import FeedItem
from ponsectors.interfaces.api.deps import get_current_actor
from ponsectors.interfaces.deps import get_store

router = APIRouter(prefix="/api/feed", tags=["Feed"])


@router.get("", response_model=List[FeedItem])
def home_feed(
    store: DataStore = Depends(get_store),
    actor: Actor = Depends(get_current_actor),
):
    """Shared projects and insights from the whole community, newest first."""
    return content_service.list_feed(store)
