#controls what parts of the internal security system are publicly exposed to the rest of the application
#FastAPI dependencies live in .deps and are imported from there directly
from .auth import Claims, PasswordHasher, TokenService, TokenError, TokenExpired, TokenBadSignature, TokenMalformed

__all__ = [
    "Claims",
    "PasswordHasher",
    "TokenService",
    "TokenError",
    "TokenExpired",
    "TokenBadSignature",
    "TokenMalformed",
]


#This file exposes a controlled authentication interface for the application.
# It keeps routes decoupled from the hashing and token implementations.
