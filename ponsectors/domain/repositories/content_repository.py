"""
Content Repository Interfaces.
Projects, insights and funding opportunities share the base CRUD contract.
"""

from ponsectors.domain.repositories.base import BaseRepository
from ponsectors.domain.schemas.funding import FundingOpportunity
from ponsectors.domain.schemas.insight import Insight
from ponsectors.domain.schemas.project import Project


class ProjectRepository(BaseRepository[Project]):
    """Interface for Project storage."""


class InsightRepository(BaseRepository[Insight]):
    """Interface for Insight storage."""


class FundingRepository(BaseRepository[FundingOpportunity]):
    """Interface for Funding Opportunity storage."""
