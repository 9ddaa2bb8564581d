"""Funding opportunity model — maps to the 'funding_opportunities' table."""

from sqlalchemy import Column, Integer, String, Text, Date, DateTime

from ponsectors.domain.enums import ContentStatus
from ponsectors.domain.models.columns import enum_column_type
from ponsectors.infrastructure.database import Base


class FundingOpportunityModel(Base):
    __tablename__ = "funding_opportunities"

    id = Column(String(32), primary_key=True)
    title = Column(String(300), nullable=False)
    description = Column(Text, nullable=False)
    deadline = Column(Date, nullable=False)
    eligibility = Column(Text, nullable=False, default="")
    application_info = Column(Text, nullable=False, default="")
    owner_id = Column(String(32), nullable=False, index=True)
    status = Column(enum_column_type(ContentStatus), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)
    version = Column(Integer, nullable=False, default=0)

    def __repr__(self):
        return f"<FundingOpportunity {self.id} - {self.title}>"
