"""Clock and id helpers shared by both storage backends."""

import uuid
from datetime import datetime

import pytz

from ponsectors.config import get_settings

settings = get_settings()
tz = pytz.timezone(settings.TIMEZONE)


def now() -> datetime:
    """Current time in the configured timezone."""
    return datetime.now(tz)


def new_id() -> str:
    return uuid.uuid4().hex
