#used to control how models are exposed when the package is imported.
from .user import User, UserRole
from .customer import Customer, CustomerStatus

#all public models
__all__ = ["User", "UserRole", "Customer", "CustomerStatus"]
