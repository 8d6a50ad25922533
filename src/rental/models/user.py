import enum
from datetime import datetime, timezone
from typing import Any, Mapping, Optional

ACTIVE = "active"


class Role(str, enum.Enum):
    USER = "user"
    ADMIN = "admin"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def role_of(document: Optional[Mapping[str, Any]]) -> Optional[Role]:
    """Role stored on a user document; ``None`` when missing or unknown."""
    if not document:
        return None
    try:
        return Role(document.get("role"))
    except ValueError:
        return None


def new_user_document(profile: Mapping[str, Any], role: Role, now: Optional[datetime] = None) -> dict[str, Any]:
    return {
        **profile,
        "role": role.value,
        "status": ACTIVE,
        "createdAt": now or utcnow(),
    }


def promotion(now: Optional[datetime] = None) -> dict[str, Any]:
    """Update document moving a user record to the admin role."""
    return {"$set": {"role": Role.ADMIN.value, "updatedAt": now or utcnow()}}
