#exposes the authentication and access-control services
from .access import AccessControl, AccessScope, Operation
from .authenticator import Authenticator, AuthResult

__all__ = ["AccessControl", "AccessScope", "Operation", "Authenticator", "AuthResult"]
