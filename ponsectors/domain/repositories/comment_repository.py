"""Comment Repository Interface."""

from typing import List, Optional, Protocol

from ponsectors.domain.schemas.comment import Comment


class CommentRepository(Protocol):
    def get_by_parent(self, parent_id: str) -> List[Comment]:
        """Comments on a content item, in insertion order."""
        ...

    def get_by_id(self, id: str) -> Optional[Comment]:
        ...

    def add(self, comment: Comment) -> Comment:
        ...

    def delete(self, id: str) -> None:
        ...

    def delete_by_parent(self, parent_id: str) -> int:
        """Remove a whole thread; returns the number of comments removed."""
        ...
