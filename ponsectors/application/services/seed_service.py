"""Bootstrap data — default admin account and the demo data set."""

from datetime import date, timedelta

import structlog

from ponsectors.config import get_settings
from ponsectors.core.clock import new_id, now
from ponsectors.domain.enums import (
    CollaboratorRole,
    CollaboratorStatus,
    ContentStatus,
    StakeholderType,
    UserRole,
    Visibility,
)
from ponsectors.domain.repositories.store import DataStore
from ponsectors.domain.schemas.auth import UserCreate
from ponsectors.domain.schemas.funding import FundingOpportunity
from ponsectors.domain.schemas.insight import Insight
from ponsectors.domain.schemas.project import Collaborator, Project
from ponsectors.application.services.auth_service import register_user

settings = get_settings()
logger = structlog.get_logger(__name__)

DEMO_PASSWORD = "password"


def ensure_default_admin(store: DataStore) -> None:
    if not settings.DEFAULT_ADMIN_PASSWORD:
        return
    if store.users.get_by_email(settings.DEFAULT_ADMIN_EMAIL):
        return
    register_user(
        store,
        UserCreate(
            email=settings.DEFAULT_ADMIN_EMAIL,
            password=settings.DEFAULT_ADMIN_PASSWORD,
            name="Admin",
            stakeholder_type=StakeholderType.ORGANIZATION,
            subtype="Other",
        ),
        role=UserRole.ADMIN,
    )
    logger.info("Default admin user created", email=settings.DEFAULT_ADMIN_EMAIL)


def seed_demo_data(store: DataStore) -> bool:
    """Load the demo community into an empty store. Returns False if users already exist."""
    if store.users.list():
        logger.info("Demo data skipped, store not empty")
        return False

    amir = register_user(store, UserCreate(
        email="amir@example.com",
        password=DEMO_PASSWORD,
        name="Amir Musema",
        stakeholder_type=StakeholderType.INDIVIDUAL,
        subtype="Professional",
        country="Ethiopia",
        city="Addis Ababa",
        focus_areas=["Technology and Innovation", "Agriculture and Food Security"],
        about="Software engineer passionate about agritech.",
    ))
    ministry = register_user(store, UserCreate(
        email="minagri@gov.et",
        password=DEMO_PASSWORD,
        name="Federal Ministry of Agriculture",
        stakeholder_type=StakeholderType.ORGANIZATION,
        subtype="Government Agency",
        country="Ethiopia",
        city="Addis Ababa",
        focus_areas=["Agriculture and Food Security"],
        about="Leading agricultural development in Ethiopia.",
    ), role=UserRole.PREMIUM)
    register_user(store, UserCreate(
        email="jane@example.com",
        password=DEMO_PASSWORD,
        name="Jane Doe",
        stakeholder_type=StakeholderType.INDIVIDUAL,
        subtype="Researcher",
        country="Kenya",
        city="Nairobi",
        focus_areas=["Climate Change and Environmental Sustainability"],
    ))

    timestamp = now()
    store.projects.create(Project(
        id=new_id(),
        title="Urban Farming Initiative",
        description=(
            "A project to transform urban rooftops into green vegetable gardens "
            "to support local food security and reduce heat islands."
        ),
        thematic_area="Agriculture and Food Security",
        country="Ethiopia",
        city="Addis Ababa",
        owner_id=amir.id,
        status=ContentStatus.SHARED,
        visibility=Visibility.PUBLIC,
        created_at=timestamp - timedelta(hours=3),
        updated_at=timestamp,
    ))
    store.projects.create(Project(
        id=new_id(),
        title="National Soil Health Survey",
        description="Comprehensive survey of soil health across 5 major regions to inform fertilizer policy.",
        thematic_area="Agriculture and Food Security",
        country="Ethiopia",
        city="National",
        owner_id=ministry.id,
        collaborators=[Collaborator(user_id=ministry.id, role=CollaboratorRole.OWNER, status=CollaboratorStatus.ACTIVE)],
        status=ContentStatus.SHARED,
        join_requests=[amir.id],
        visibility=Visibility.PUBLIC,
        created_at=timestamp - timedelta(hours=1),
        updated_at=timestamp,
    ))
    store.insights.create(Insight(
        id=new_id(),
        title="The Future of Agritech in Africa",
        description=(
            "Reflections on how mobile payments and satellite data are "
            "revolutionizing smallholder farming."
        ),
        thematic_area="Technology and Innovation",
        author_id=amir.id,
        status=ContentStatus.SHARED,
        created_at=timestamp,
        updated_at=timestamp,
    ))
    store.funding.create(FundingOpportunity(
        id=new_id(),
        title="ArifPay Innovation Challenge",
        description="Grants for startups working on financial inclusion in rural areas.",
        deadline=date.today() + timedelta(days=90),
        eligibility="Registered startups in Ethiopia.",
        application_info="Apply via the portal link.",
        owner_id=ministry.id,
        status=ContentStatus.SHARED,
        created_at=timestamp,
        updated_at=timestamp,
    ))
    logger.info("Demo data seeded", users=3, projects=2, insights=1, funding=1)
    return True
