"""
DataStore Interface.
The single seam between the application services and a storage backend.
"""

from typing import Protocol

from ponsectors.domain.repositories.comment_repository import CommentRepository
from ponsectors.domain.repositories.content_repository import (
    FundingRepository,
    InsightRepository,
    ProjectRepository,
)
from ponsectors.domain.repositories.notification_repository import NotificationRepository
from ponsectors.domain.repositories.user_repository import UserRepository


class DataStore(Protocol):
    users: UserRepository
    projects: ProjectRepository
    insights: InsightRepository
    funding: FundingRepository
    comments: CommentRepository
    notifications: NotificationRepository
