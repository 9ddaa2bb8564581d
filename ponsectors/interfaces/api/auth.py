"""Auth API routes — register, login, session restore, logout."""

from fastapi import APIRouter, Depends, Response, status

from ponsectors.application.services.access_policy import Actor
from ponsectors.application.services.auth_service import login as login_user, register_user
from ponsectors.domain.repositories.store import DataStore
from ponsectors.domain.schemas.auth import LoginRequest, SessionRead, TokenResponse, User, UserCreate
from ponsectors.interfaces.api.deps import get_current_actor
from ponsectors.interfaces.deps import get_store

router = APIRouter(prefix="/api/auth", tags=["Auth"])


@router.post("/register", response_model=User, status_code=status.HTTP_201_CREATED)
def register(body: UserCreate, store: DataStore = Depends(get_store)):
    return register_user(store, body)


@router.post("/login", response_model=TokenResponse)
def login(body: LoginRequest, store: DataStore = Depends(get_store)):
    return login_user(store, body.email, body.password)


@router.get("/me", response_model=SessionRead)
def get_me(actor: Actor = Depends(get_current_actor)):
    return SessionRead(user=actor.user, effective_role=actor.role)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
def logout(actor: Actor = Depends(get_current_actor)):
    # Tokens are stateless; the client discards its copy
    return Response(status_code=status.HTTP_204_NO_CONTENT)
