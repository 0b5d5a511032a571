import logging
from fastapi import APIRouter, Depends
#To prevent accidental exposure of sensitive fields
from ..errors import NotFound, ValidationFailed
from ..repositories.users import UserRepository
from ..schemas.user import UserProfile, UserListResponse, MessageResponse
from ..utils.auth import Claims
from ..utils.deps import get_user_repository, require_admin

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users", tags=["users"])

#Only admins can access it
@router.get("", response_model=UserListResponse)
def get_users(
    users: UserRepository = Depends(get_user_repository),
    claims: Claims = Depends(require_admin)
):
    """Get all active users (admin only)."""
    rows = users.list_active()
    #Converts SQLAlchemy objects into safe API responses
    return UserListResponse(data=[UserProfile.model_validate(u) for u in rows], count=len(rows))

#Accounts are never deleted, only deactivated
@router.patch("/{user_id}/deactivate", response_model=MessageResponse)
def deactivate_user(
    user_id: int,
    users: UserRepository = Depends(get_user_repository),
    claims: Claims = Depends(require_admin)
):
    """Deactivate a user account (admin only)."""
    if user_id == claims.subject_id:
        raise ValidationFailed(message="You cannot deactivate your own account")
    if not users.deactivate(user_id):
        raise NotFound("User not found")
    logger.info("User %s deactivated by %s", user_id, claims.subject_id)
    return MessageResponse(success=True, message="User deactivated successfully")
