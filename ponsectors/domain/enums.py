"""Enumerations shared by the domain schemas and ORM models."""

import enum


class StakeholderType(str, enum.Enum):
    INDIVIDUAL = "Individual"
    ORGANIZATION = "Organization"
    GROUP = "Group"


class UserRole(str, enum.Enum):
    STANDARD = "Standard"
    PREMIUM = "Premium"
    ADMIN = "Admin"


class ContentStatus(str, enum.Enum):
    DRAFT = "Draft"
    PENDING = "Pending"
    SHARED = "Shared"
    REJECTED = "Rejected"


class ContentKind(str, enum.Enum):
    PROJECT = "project"
    INSIGHT = "insight"
    FUNDING = "funding"


class CollaboratorRole(str, enum.Enum):
    OWNER = "Owner"
    COLLABORATOR = "Collaborator"
    VIEWER = "Viewer"


class CollaboratorStatus(str, enum.Enum):
    ACTIVE = "Active"
    PENDING = "Pending"


class Visibility(str, enum.Enum):
    PUBLIC = "Public"
    RESTRICTED = "Restricted"


class NotificationType(str, enum.Enum):
    JOIN_REQUEST = "join_request"
    COLLABORATOR_ADDED = "collaborator_added"
    CONTENT_APPROVED = "content_approved"
    CONTENT_REJECTED = "content_rejected"
    COMMENT_ADDED = "comment_added"
    COMMENT_REPLY = "comment_reply"
