import logging
from fastapi import APIRouter, Depends, status, Query
from typing import Optional

from ..errors import NotFound
from ..models.customer import CustomerStatus
from ..repositories.customers import CustomerRepository, CustomerFilters
from ..schemas.customer import (
    CustomerCreate, CustomerUpdate, CustomerResponse, CustomerEnvelope,
    CustomerListResponse, AreasResponse,
)
from ..schemas.user import MessageResponse
from ..services.access import AccessControl, Operation
from ..utils.deps import get_access_control, get_customer_repository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/customers", tags=["customers"])

#Distinct areas visible to the caller
@router.get("/areas", response_model=AreasResponse)
def get_areas(
    access: AccessControl = Depends(get_access_control),
    customers: CustomerRepository = Depends(get_customer_repository)
):
    """Get the distinct areas of the customers the caller can see."""
    return AreasResponse(data=customers.areas(access.scope()))

#List customers with filters and search
@router.get("", response_model=CustomerListResponse)
def get_customers(
    status_filter: Optional[CustomerStatus] = Query(None, alias="status"),
    tapped: Optional[bool] = None,
    search: Optional[str] = None,
    area: Optional[str] = None,
    access: AccessControl = Depends(get_access_control),
    customers: CustomerRepository = Depends(get_customer_repository)
):
    """Get customers, limited to the caller's own unless they are an Administrator."""
    filters = CustomerFilters(status=status_filter, tapped=tapped, search=search, area=area)
    rows = customers.list(access.scope(), filters)
    return CustomerListResponse(
        data=[CustomerResponse.model_validate(c) for c in rows],
        count=len(rows),
    )

#Create a new customer
@router.post("", response_model=CustomerEnvelope, status_code=status.HTTP_201_CREATED)
def create_customer(
    customer_data: CustomerCreate,
    access: AccessControl = Depends(get_access_control),
    customers: CustomerRepository = Depends(get_customer_repository)
):
    """Create a customer owned by the caller."""
    customer = customers.create(access.prepare_create(customer_data.model_dump()))
    logger.info("User %s created customer %s", access.claims.subject_id, customer.id)
    return CustomerEnvelope(
        message="Customer created successfully",
        data=CustomerResponse.model_validate(customer),
    )

#Get customer details
@router.get("/{customer_id}", response_model=CustomerEnvelope)
def get_customer(
    customer_id: int,
    access: AccessControl = Depends(get_access_control),
    customers: CustomerRepository = Depends(get_customer_repository)
):
    customer = access.authorize(Operation.READ_ONE, customers.get(customer_id))
    return CustomerEnvelope(data=CustomerResponse.model_validate(customer))

#Update customer info
@router.put("/{customer_id}", response_model=CustomerEnvelope)
def update_customer(
    customer_id: int,
    customer_update: CustomerUpdate,
    access: AccessControl = Depends(get_access_control),
    customers: CustomerRepository = Depends(get_customer_repository)
):
    """Update customer information; ownership never changes."""
    access.authorize(Operation.UPDATE, customers.get(customer_id))

    patch = access.sanitize_patch(customer_update.model_dump(exclude_unset=True))
    if not customers.update(customer_id, patch):
        #deleted between the lookup and the update
        raise NotFound("Customer not found")

    #re-read through the same check; a concurrent delete surfaces as NotFound
    customer = access.authorize(Operation.READ_ONE, customers.get(customer_id))
    return CustomerEnvelope(
        message="Customer updated successfully",
        data=CustomerResponse.model_validate(customer),
    )

#Delete a customer
@router.delete("/{customer_id}", response_model=MessageResponse)
def delete_customer(
    customer_id: int,
    access: AccessControl = Depends(get_access_control),
    customers: CustomerRepository = Depends(get_customer_repository)
):
    access.authorize(Operation.DELETE, customers.get(customer_id))
    if not customers.delete(customer_id):
        raise NotFound("Customer not found")
    logger.info("User %s deleted customer %s", access.claims.subject_id, customer_id)
    return MessageResponse(success=True, message="Customer deleted successfully")
