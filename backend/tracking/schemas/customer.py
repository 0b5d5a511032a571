from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from typing import List, Optional
from datetime import datetime
from ..models.customer import CustomerStatus

_OPTIONAL_TEXT = (
    "first_name", "last_name", "email", "country_code", "contact_number",
    "designation", "nature_of_business", "area", "remarks",
)

#optional contact fields shared by create and update
class CustomerFields(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    first_name: Optional[str] = Field(default=None, max_length=100)
    last_name: Optional[str] = Field(default=None, max_length=100)
    email: Optional[EmailStr] = None
    country_code: Optional[str] = Field(default=None, pattern=r"^\+?[0-9]{1,4}$")
    contact_number: Optional[str] = Field(default=None, max_length=50, pattern=r"^[0-9\s\-()]+$")
    designation: Optional[str] = Field(default=None, max_length=100)
    nature_of_business: Optional[str] = Field(default=None, max_length=255)
    area: Optional[str] = Field(default=None, max_length=100)
    remarks: Optional[str] = None
    latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    longitude: Optional[float] = Field(default=None, ge=-180, le=180)

    #forms send "" for untouched inputs
    @field_validator(*_OPTIONAL_TEXT, mode="before")
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v):
        return v.lower() if v else v

#customer creation contract
#owner is never taken from the body; extra keys such as owner_id are dropped
class CustomerCreate(CustomerFields):
    company_name: str = Field(min_length=1, max_length=255)
    business_address: str = Field(min_length=1, max_length=500)
    status: CustomerStatus = CustomerStatus.ACTIVE
    tapped: bool = False

#safe partial updates: unset fields stay unchanged
class CustomerUpdate(CustomerFields):
    company_name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    business_address: Optional[str] = Field(default=None, min_length=1, max_length=500)
    status: Optional[CustomerStatus] = None
    tapped: Optional[bool] = None

    @field_validator("company_name", "business_address", "status", "tapped")
    @classmethod
    def not_null(cls, v):
        #these columns are NOT NULL; an explicit null is not "unchanged"
        if v is None:
            raise ValueError("cannot be null")
        return v

#API output schema
class CustomerResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    owner_id: int
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    country_code: Optional[str] = None
    contact_number: Optional[str] = None
    designation: Optional[str] = None
    company_name: str
    business_address: str
    nature_of_business: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    area: Optional[str] = None
    remarks: Optional[str] = None
    status: CustomerStatus
    tapped: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

class CustomerEnvelope(BaseModel):
    success: bool = True
    message: Optional[str] = None
    data: CustomerResponse

class CustomerListResponse(BaseModel):
    success: bool = True
    data: List[CustomerResponse]
    count: int

class AreasResponse(BaseModel):
    success: bool = True
    data: List[str]
