"""Column helpers shared by the ORM models."""

from sqlalchemy import Enum


def enum_column_type(enum_cls):
    """Store enum values (not member names) in a portable VARCHAR."""
    return Enum(
        enum_cls,
        native_enum=False,
        length=32,
        values_callable=lambda members: [m.value for m in members],
        validate_strings=True,
    )
