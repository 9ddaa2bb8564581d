"""User domain model — maps to the 'users' table."""

from sqlalchemy import Column, Integer, String, Boolean, DateTime, Text, JSON

from ponsectors.domain.enums import StakeholderType, UserRole
from ponsectors.domain.models.columns import enum_column_type
from ponsectors.infrastructure.database import Base


class UserModel(Base):
    __tablename__ = "users"

    id = Column(String(32), primary_key=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    name = Column(String(200), nullable=False)
    stakeholder_type = Column(enum_column_type(StakeholderType), nullable=False)
    subtype = Column(String(100), nullable=True)
    country = Column(String(100), nullable=False, default="")
    city = Column(String(100), nullable=False, default="")
    focus_areas = Column(JSON, nullable=False, default=list)
    about = Column(Text, nullable=True)
    avatar_url = Column(String(500), nullable=True)
    role = Column(enum_column_type(UserRole), nullable=False, default=UserRole.STANDARD)
    is_verified = Column(Boolean, default=False)
    joined_at = Column(DateTime(timezone=True), nullable=False)
    saved_project_ids = Column(JSON, nullable=False, default=list)
    version = Column(Integer, nullable=False, default=0)

    def __repr__(self):
        return f"<User {self.email}>"
