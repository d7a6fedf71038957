# File: app/repositories/user_repository.py
import logging
from typing import Optional, Union

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import Conflict, StoreFailure
from app.models.user import User
from app.schemas.user import UserCredentials, UserOut

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = {"name", "email", "password"}


class UserRepository:
    # reads return pydantic snapshots; the digest only leaves via include_password=True

    def __init__(self, db: Session) -> None:
        self.db = db

    def find_by_id(self, user_id: str) -> Optional[UserOut]:
        try:
            user = self.db.get(User, user_id)
        except SQLAlchemyError as e:
            logger.error(f"Error fetching user by ID: {e}", exc_info=True)
            raise StoreFailure() from e
        return UserOut.model_validate(user) if user else None

    def find_by_email(
        self, email: str, include_password: bool = False
    ) -> Optional[Union[UserOut, UserCredentials]]:
        try:
            user = self.db.execute(select(User).where(User.email == email)).scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(f"Error fetching user by email: {e}", exc_info=True)
            raise StoreFailure() from e
        if not user:
            return None
        if include_password:
            return UserCredentials.model_validate(user)
        return UserOut.model_validate(user)

    def create(self, name: str, email: str, password_hash: str) -> UserOut:
        """Insert a user; a taken email raises Conflict."""
        user = User(name=name, email=email, password=password_hash)
        try:
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)
        except IntegrityError as e:
            self.db.rollback()
            logger.info(f"Rejected duplicate registration for {email}")
            raise Conflict() from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error creating user: {e}", exc_info=True)
            raise StoreFailure() from e
        return UserOut.model_validate(user)

    def update(self, user_id: str, **fields) -> Optional[UserOut]:
        unknown = set(fields) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update fields: {', '.join(sorted(unknown))}")
        try:
            user = self.db.get(User, user_id)
            if not user:
                return None
            for key, value in fields.items():
                setattr(user, key, value)
            self.db.commit()
            self.db.refresh(user)
        except IntegrityError as e:
            self.db.rollback()
            raise Conflict("Email already in use") from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error updating user: {e}", exc_info=True)
            raise StoreFailure() from e
        return UserOut.model_validate(user)
