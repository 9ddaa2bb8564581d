import sys
import os

# Add parent dir to path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from ponsectors.config import get_settings
from ponsectors.core.logging import configure_logging
from ponsectors.infrastructure.database import Base, engine
from ponsectors.interfaces.deps import store_scope
from ponsectors.application.services.seed_service import seed_demo_data

# Register all tables on Base.metadata
import ponsectors.main  # noqa: F401,E402


def seed():
    settings = get_settings()
    configure_logging()
    print(f"Seeding demo data into the '{settings.STORAGE_BACKEND}' backend...")

    if settings.STORAGE_BACKEND == "sql":
        Base.metadata.create_all(bind=engine)

    with store_scope() as store:
        if seed_demo_data(store):
            print("Demo data created. Log in as amir@example.com / password.")
        else:
            print("Store already has users, nothing to do.")


if __name__ == "__main__":
    seed()
