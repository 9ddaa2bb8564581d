"""
SQLAlchemy Implementations of the Content Repositories.
"""

from sqlalchemy.orm import Session

from ponsectors.domain.models.funding import FundingOpportunityModel
from ponsectors.domain.models.insight import InsightModel
from ponsectors.domain.models.project import ProjectModel
from ponsectors.domain.repositories.content_repository import (
    FundingRepository,
    InsightRepository,
    ProjectRepository,
)
from ponsectors.domain.schemas.funding import FundingOpportunity
from ponsectors.domain.schemas.insight import Insight
from ponsectors.domain.schemas.project import Project
from ponsectors.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyProjectRepository(SQLAlchemyRepository[ProjectModel, Project], ProjectRepository):
    json_fields = ("collaborators", "attachments", "join_requests")

    def __init__(self, db: Session):
        super().__init__(db, ProjectModel, Project)


class SQLAlchemyInsightRepository(SQLAlchemyRepository[InsightModel, Insight], InsightRepository):
    json_fields = ("attachments",)

    def __init__(self, db: Session):
        super().__init__(db, InsightModel, Insight)


class SQLAlchemyFundingRepository(SQLAlchemyRepository[FundingOpportunityModel, FundingOpportunity], FundingRepository):
    def __init__(self, db: Session):
        super().__init__(db, FundingOpportunityModel, FundingOpportunity)
