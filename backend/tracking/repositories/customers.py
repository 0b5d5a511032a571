from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from sqlalchemy import delete, func, or_, update
from sqlalchemy.orm import Session

from ..models.customer import Customer, CustomerStatus
from ..services.access import AccessScope

#columns no write may touch after insert
IMMUTABLE_FIELDS = frozenset({"id", "owner_id", "created_at", "updated_at"})


@dataclass
class CustomerFilters:
    status: Optional[CustomerStatus] = None
    tapped: Optional[bool] = None
    search: Optional[str] = None
    area: Optional[str] = None


class CustomerRepository:
    """
    Plain CRUD over customers.

    Reads take the AccessScope computed by AccessControl; the repository
    applies it but never decides it.
    """

    def __init__(self, db: Session):
        self.db = db

    def _scoped(self, scope: AccessScope):
        query = self.db.query(Customer)
        if not scope.unrestricted:
            query = query.filter(Customer.owner_id == scope.owner_id)
        return query

    def create(self, values: Dict[str, Any]) -> Customer:
        customer = Customer(**values)
        self.db.add(customer)
        self.db.commit()
        self.db.refresh(customer)
        return customer

    def get(self, customer_id: int) -> Optional[Customer]:
        return self.db.get(Customer, customer_id)

    def list(self, scope: AccessScope, filters: Optional[CustomerFilters] = None) -> List[Customer]:
        query = self._scoped(scope)
        filters = filters or CustomerFilters()

        # Apply filters
        if filters.status is not None:
            query = query.filter(Customer.status == filters.status)
        if filters.tapped is not None:
            query = query.filter(Customer.tapped.is_(filters.tapped))
        if filters.area:
            query = query.filter(Customer.area == filters.area)

        # Apply search
        if filters.search:
            search_filter = f"%{filters.search}%"
            query = query.filter(
                or_(
                    Customer.company_name.ilike(search_filter),
                    Customer.first_name.ilike(search_filter),
                    Customer.last_name.ilike(search_filter),
                    Customer.email.ilike(search_filter),
                )
            )

        return query.order_by(Customer.created_at.desc(), Customer.id.desc()).all()

    def areas(self, scope: AccessScope) -> List[str]:
        query = self._scoped(scope).with_entities(Customer.area).filter(Customer.area.isnot(None))
        return [area for (area,) in query.distinct().order_by(Customer.area).all()]

    def update(self, customer_id: int, patch: Dict[str, Any]) -> bool:
        """Apply a partial update in one statement; False when the id does not exist."""
        values = {k: v for k, v in patch.items() if k not in IMMUTABLE_FIELDS}
        result = self.db.execute(
            update(Customer)
            .where(Customer.id == customer_id)
            .values(**values, updated_at=func.now())
        )
        self.db.commit()
        return result.rowcount > 0

    def delete(self, customer_id: int) -> bool:
        result = self.db.execute(delete(Customer).where(Customer.id == customer_id))
        self.db.commit()
        return result.rowcount > 0
