"""SQLAlchemy-backed DataStore bound to one session."""

from sqlalchemy.orm import Session

from ponsectors.infrastructure.repositories.comment_repository import SQLAlchemyCommentRepository
from ponsectors.infrastructure.repositories.content_repository import (
    SQLAlchemyFundingRepository,
    SQLAlchemyInsightRepository,
    SQLAlchemyProjectRepository,
)
from ponsectors.infrastructure.repositories.notification_repository import SQLAlchemyNotificationRepository
from ponsectors.infrastructure.repositories.user_repository import SQLAlchemyUserRepository


class SQLAlchemyStore:
    def __init__(self, db: Session):
        self.db = db
        self.users = SQLAlchemyUserRepository(db)
        self.projects = SQLAlchemyProjectRepository(db)
        self.insights = SQLAlchemyInsightRepository(db)
        self.funding = SQLAlchemyFundingRepository(db)
        self.comments = SQLAlchemyCommentRepository(db)
        self.notifications = SQLAlchemyNotificationRepository(db)
