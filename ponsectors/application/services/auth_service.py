"""Auth service — JWT token management, password hashing and sessions."""

from datetime import datetime, timedelta, timezone
from typing import Optional

import structlog
from jose import JWTError, jwt
from passlib.context import CryptContext

from ponsectors.config import get_settings
from ponsectors.core.clock import new_id, now
from ponsectors.core.concurrency import mutate_entity
from ponsectors.core.exceptions import (
    BackendUnavailableException,
    ConcurrentUpdateException,
    InvalidCredentialsException,
    UnauthorizedException,
)
from ponsectors.domain.enums import UserRole
from ponsectors.domain.repositories.store import DataStore
from ponsectors.domain.schemas.auth import TokenResponse, User, UserCreate
from ponsectors.application.services.access_policy import Actor, actor_for

settings = get_settings()
logger = structlog.get_logger(__name__)
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=settings.BCRYPT_ROUNDS)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.JWT_EXPIRATION_MINUTES)
    )
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> Optional[dict]:
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except JWTError:
        return None


def register_user(store: DataStore, body: UserCreate, role: UserRole = UserRole.STANDARD) -> User:
    user = User(
        id=new_id(),
        email=body.email,
        name=body.name,
        stakeholder_type=body.stakeholder_type,
        subtype=body.subtype,
        country=body.country,
        city=body.city,
        focus_areas=body.focus_areas,
        about=body.about,
        role=role,
        is_verified=False,
        joined_at=now(),
    )
    created = store.users.create(user, hash_password(body.password))
    logger.info("User registered", user_id=created.id, role=created.role.value)
    return created


def authenticate_user(store: DataStore, email: str, password: str) -> User:
    user = store.users.get_by_email(email)
    password_hash = store.users.get_password_hash(user.id) if user else None
    if not user or not password_hash or not verify_password(password, password_hash):
        raise InvalidCredentialsException()
    return user


def sync_admin_override(store: DataStore, user: User) -> User:
    """Best-effort persistence of the allow-list Admin role."""
    try:
        return mutate_entity(
            store.users,
            user.id,
            lambda u: None if u.role == UserRole.ADMIN else u.with_changes(role=UserRole.ADMIN),
        )
    except (ConcurrentUpdateException, BackendUnavailableException) as exc:
        logger.warning("Admin override not persisted", user_id=user.id, error=exc.message)
        return user


def open_session(store: DataStore, user: User) -> Actor:
    actor = actor_for(user)
    if actor.is_admin and user.role != UserRole.ADMIN and settings.PERSIST_ADMIN_OVERRIDE:
        actor = Actor(user=sync_admin_override(store, user), role=actor.role)
    return actor


def login(store: DataStore, email: str, password: str) -> TokenResponse:
    user = authenticate_user(store, email, password)
    actor = open_session(store, user)
    token = create_access_token(data={"sub": user.id, "role": actor.role.value})
    logger.info("User logged in", user_id=user.id, effective_role=actor.role.value)
    return TokenResponse(access_token=token, user=actor.user, effective_role=actor.role)


def restore_session(store: DataStore, token: str) -> Actor:
    """Resolve a bearer token to the acting user, re-applying the admin allow-list."""
    payload = decode_access_token(token)
    if payload is None or not payload.get("sub"):
        raise UnauthorizedException("Invalid or expired token")

    user = store.users.get_by_id(payload["sub"])
    if user is None:
        raise UnauthorizedException("User not found")
    return open_session(store, user)
