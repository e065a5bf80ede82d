"""Domain enums — pure Python, no external dependencies."""

from enum import Enum


class CastStatus(str, Enum):
    WAITING = "waiting"
    SERVING = "serving"
    ENDED = "ended"


class FeeTag(str, Enum):
    NOMINATION = "nomination"
    COMPANION = "companion"
    DOUHAN = "douhan"


class TableSessionStatus(str, Enum):
    ACTIVE = "active"
    PAYMENT_PENDING = "payment_pending"
    COMPLETED = "completed"
    CLOSED = "closed"


class ProfileRole(str, Enum):
    GUEST = "guest"
    CAST = "cast"
    STAFF = "staff"
    ADMIN = "admin"
