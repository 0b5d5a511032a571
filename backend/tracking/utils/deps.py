from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from ..database import get_db
from ..errors import Forbidden
from ..repositories.customers import CustomerRepository
from ..repositories.users import UserRepository
from ..services.access import AccessControl
from ..services.authenticator import Authenticator
from .auth import Claims, PasswordHasher, TokenService

#missing or non-bearer headers reach us as None instead of FastAPI's own 403
bearer_scheme = HTTPBearer(auto_error=False)


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher


def get_authenticator(
    db: Session = Depends(get_db),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: TokenService = Depends(get_token_service),
) -> Authenticator:
    return Authenticator(UserRepository(db), hasher, tokens)


def get_current_claims(
    credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme),
    authenticator: Authenticator = Depends(get_authenticator),
) -> Claims:
    """Verified identity of the caller; raises Unauthenticated otherwise."""
    token = credentials.credentials if credentials else None
    return authenticator.authenticate_request(token)


def get_access_control(claims: Claims = Depends(get_current_claims)) -> AccessControl:
    return AccessControl(claims)


def require_admin(claims: Claims = Depends(get_current_claims)) -> Claims:
    #Only admins can access it
    if not claims.is_admin:
        raise Forbidden("Admin access required")
    return claims


def get_customer_repository(db: Session = Depends(get_db)) -> CustomerRepository:
    return CustomerRepository(db)


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    return UserRepository(db)
