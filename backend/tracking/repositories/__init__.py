from .users import UserRepository
from .customers import CustomerRepository, CustomerFilters

__all__ = ["UserRepository", "CustomerRepository", "CustomerFilters"]
