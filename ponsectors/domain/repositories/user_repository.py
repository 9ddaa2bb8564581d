"""
User Repository Interface.
Directory, credentials and saved-project operations.
"""

from typing import List, Optional, Protocol

from ponsectors.domain.schemas.auth import User


class UserRepository(Protocol):
    """Interface for User-specific operations."""

    def get_by_id(self, id: str) -> Optional[User]:
        ...

    def get_by_email(self, email: str) -> Optional[User]:
        """Case-insensitive exact match on email."""
        ...

    def list(self) -> List[User]:
        """Whole user directory, in registration order."""
        ...

    def create(self, user: User, password_hash: str) -> User:
        """Persist a new user; raises EmailAlreadyRegisteredException on duplicates."""
        ...

    def update(self, user: User) -> User:
        """Compare-and-swap update of profile fields (credentials untouched)."""
        ...

    def get_password_hash(self, user_id: str) -> Optional[str]:
        ...

    def toggle_save(self, user_id: str, project_id: str) -> User:
        """Add ``project_id`` to the saved set if absent, remove it if present."""
        ...
