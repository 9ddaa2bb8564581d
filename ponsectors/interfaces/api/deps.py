"""FastAPI dependency — JWT auth and the acting user."""

from typing import Optional

import structlog
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from ponsectors.application.services.access_policy import Actor
from ponsectors.application.services.auth_service import restore_session
from ponsectors.core.exceptions import ForbiddenException, UnauthorizedException
from ponsectors.domain.repositories.store import DataStore
from ponsectors.interfaces.deps import get_store

security = HTTPBearer(auto_error=False)


def get_current_actor(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    store: DataStore = Depends(get_store),
) -> Actor:
    """Resolve the bearer token into the acting user and their effective role."""
    if credentials is None:
        raise UnauthorizedException("Not authenticated")

    actor = restore_session(store, credentials.credentials)
    structlog.contextvars.bind_contextvars(user_id=actor.id, role=actor.role.value)
    return actor


def require_admin(actor: Actor = Depends(get_current_actor)) -> Actor:
    """Require the Admin role (stored or granted by the allow-list)."""
    if not actor.is_admin:
        raise ForbiddenException("Admin access required")
    return actor
