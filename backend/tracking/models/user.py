#Define table columns and types.
from sqlalchemy import Column, Integer, String, Boolean, DateTime, Enum
#Provides database functions for timestamps
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
#to define controlled value sets.
import enum
from ..database import Base

#spellings used by older data and clients, mapped onto the two canonical roles
_ROLE_ALIASES = {
    "administrator": "Administrator",
    "admin": "Administrator",
    "sales executive": "Sales Executive",
    "sales_executive": "Sales Executive",
    "salesexecutive": "Sales Executive",
    "agent": "Sales Executive",
}

class UserRole(enum.Enum):
    ADMINISTRATOR = "Administrator"
    SALES_EXECUTIVE = "Sales Executive"

    @classmethod
    def parse(cls, value) -> "UserRole":
        """Normalize a role value from the outside world, rejecting unknown roles."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ValueError(f"Unsupported role {value!r}")
        canonical = _ROLE_ALIASES.get(value.strip().lower())
        if canonical is None:
            raise ValueError(f"Unsupported role {value!r}")
        return cls(canonical)

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(50), unique=True, index=True, nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)
    full_name = Column(String(100))
    #stored by value so the column holds "Administrator" / "Sales Executive"
    role = Column(
        Enum(UserRole, values_callable=lambda roles: [r.value for r in roles], name="user_role"),
        nullable=False,
        default=UserRole.SALES_EXECUTIVE,
    )
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
    last_login = Column(DateTime(timezone=True))

    # Relationships
    customers = relationship("Customer", back_populates="owner")

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMINISTRATOR
