"""
Row-level access control for customer records.

Administrators see and change everything; Sales Executives only the records
they own. The decisions here are pure: no rows are fetched, callers hand in
the record they already looked up.
"""
import enum
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..errors import Forbidden, NotFound, Unauthenticated

logger = logging.getLogger(__name__)

#fields a client can never set through an update
PROTECTED_FIELDS = ("id", "owner_id", "created_at", "updated_at")


class Operation(enum.Enum):
    CREATE = "create"
    READ_ONE = "read_one"
    READ_MANY = "read_many"
    UPDATE = "update"
    DELETE = "delete"


@dataclass(frozen=True)
class AccessScope:
    """Ownership predicate for multi-record reads; owner_id None means unrestricted."""
    owner_id: Optional[int] = None

    @property
    def unrestricted(self) -> bool:
        return self.owner_id is None

    @classmethod
    def everything(cls) -> "AccessScope":
        return cls()

    @classmethod
    def owned_by(cls, owner_id: int) -> "AccessScope":
        return cls(owner_id=owner_id)


class AccessControl:
    """Access decisions for one request's claims."""

    def __init__(self, claims):
        if claims is None:
            raise Unauthenticated()
        self.claims = claims

    @property
    def is_admin(self) -> bool:
        return self.claims.is_admin

    def prepare_create(self, values: Dict[str, Any]) -> Dict[str, Any]:
        """Any authenticated identity may create; it always becomes the owner."""
        prepared = {k: v for k, v in values.items() if k not in PROTECTED_FIELDS}
        prepared["owner_id"] = self.claims.subject_id
        return prepared

    def scope(self) -> AccessScope:
        if self.is_admin:
            return AccessScope.everything()
        return AccessScope.owned_by(self.claims.subject_id)

    def authorize(self, operation: Operation, record, resource: str = "Customer"):
        """
        Check a single-record operation against an already looked-up record.

        Raises NotFound when the record is missing and Forbidden when the
        caller is neither its owner nor an Administrator.
        """
        if operation in (Operation.CREATE, Operation.READ_MANY):
            raise ValueError(f"{operation.value} is not a single-record operation")
        if record is None:
            raise NotFound(f"{resource} not found")
        if self.is_admin or record.owner_id == self.claims.subject_id:
            return record
        logger.warning(
            "Denied %s on %s %s to user %s (owner %s)",
            operation.value, resource.lower(), record.id, self.claims.subject_id, record.owner_id,
        )
        raise Forbidden()

    def sanitize_patch(self, patch: Dict[str, Any]) -> Dict[str, Any]:
        #ownership is fixed at creation, even for Administrators
        return {k: v for k, v in patch.items() if k not in PROTECTED_FIELDS}
