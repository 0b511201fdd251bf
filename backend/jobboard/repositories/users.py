# jobboard/repositories/users.py
from __future__ import annotations

from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from jobboard.models.user import User


class UserRepository:
    """Credential store: one row per user, unique on username and email."""

    def __init__(self, db: Session):
        self.db = db

    def get(self, user_id: int) -> Optional[User]:
        return self.db.get(User, user_id)

    def find_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def find_by_username(self, username: str) -> Optional[User]:
        return self.db.query(User).filter(User.username == username).first()

    def create(self, *, username: str, email: str, password_hash: str, experience_level: str) -> User:
        """
        Insert and commit a user. A duplicate username/email surfaces as
        sqlalchemy.exc.IntegrityError from the commit; callers roll back.
        """
        user = User(
            username=username,
            email=email,
            password_hash=password_hash,
            experience_level=experience_level,
        )
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user

    def count(self) -> int:
        return int(self.db.query(func.count(User.id)).scalar() or 0)
