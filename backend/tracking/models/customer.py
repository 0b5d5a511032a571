#Define table columns and types.
from sqlalchemy import Column, Integer, String, Text, Boolean, Float, DateTime, ForeignKey, Enum
#Provides database functions for timestamps
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
#to define controlled value sets.
import enum
from ..database import Base

class CustomerStatus(enum.Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"

class Customer(Base):
    __tablename__ = "customers"

    id = Column(Integer, primary_key=True, index=True)
    #the creating user; never changed after insert
    owner_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    first_name = Column(String(100))
    last_name = Column(String(100))
    email = Column(String(255))
    country_code = Column(String(5))
    contact_number = Column(String(50))
    designation = Column(String(100))
    company_name = Column(String(255), nullable=False, index=True)
    business_address = Column(String(500), nullable=False)
    nature_of_business = Column(String(255))
    latitude = Column(Float)
    longitude = Column(Float)
    area = Column(String(100), index=True)
    remarks = Column(Text)
    status = Column(
        Enum(CustomerStatus, values_callable=lambda s: [v.value for v in s], name="customer_status"),
        nullable=False,
        default=CustomerStatus.ACTIVE,
    )
    tapped = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    owner = relationship("User", back_populates="customers")
