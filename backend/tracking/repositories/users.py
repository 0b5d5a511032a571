from typing import List, Optional

from sqlalchemy import func, update
from sqlalchemy.orm import Session

from ..models.user import User, UserRole


class UserRepository:
    """Credential store: users keyed by username/email with their password hash."""

    def __init__(self, db: Session):
        self.db = db

    def find_by_username(self, username: str, active_only: bool = True) -> Optional[User]:
        query = self.db.query(User).filter(User.username == username)
        if active_only:
            query = query.filter(User.is_active.is_(True))
        return query.first()

    def find_by_email(self, email: str, active_only: bool = True) -> Optional[User]:
        query = self.db.query(User).filter(func.lower(User.email) == email.lower())
        if active_only:
            query = query.filter(User.is_active.is_(True))
        return query.first()

    def get_active(self, user_id: int) -> Optional[User]:
        return self.db.query(User).filter(User.id == user_id, User.is_active.is_(True)).first()

    def list_active(self) -> List[User]:
        return (
            self.db.query(User)
            .filter(User.is_active.is_(True))
            .order_by(User.created_at.desc(), User.id.desc())
            .all()
        )

    def create(
        self,
        username: str,
        email: str,
        password_hash: str,
        full_name: Optional[str] = None,
        role: UserRole = UserRole.SALES_EXECUTIVE,
    ) -> User:
        user = User(
            username=username,
            email=email.lower(),
            password_hash=password_hash,
            full_name=full_name,
            role=role,
            is_active=True,
        )
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user

    def touch_last_login(self, user_id: int) -> None:
        self.db.execute(update(User).where(User.id == user_id).values(last_login=func.now()))
        self.db.commit()

    def set_role(self, user_id: int, role: UserRole) -> bool:
        result = self.db.execute(
            update(User).where(User.id == user_id).values(role=role, updated_at=func.now())
        )
        self.db.commit()
        return result.rowcount > 0

    def deactivate(self, user_id: int) -> bool:
        result = self.db.execute(
            update(User)
            .where(User.id == user_id, User.is_active.is_(True))
            .values(is_active=False, updated_at=func.now())
        )
        self.db.commit()
        return result.rowcount > 0

    def rollback(self) -> None:
        self.db.rollback()
