# storefront/api/deps.py
from fastapi import Depends, Header, HTTPException
from sqlalchemy.orm import Session

from storefront.data.database import get_db
from storefront.data.models.user import UserModel
from storefront.services.lock_service import LockService
from storefront.services.user_service import UserService
from storefront.utils.settings import AUTH_EMAIL_HEADER, AUTH_NAME_HEADER


def get_current_user(
    email: str | None = Header(None, alias=AUTH_EMAIL_HEADER),
    name: str | None = Header(None, alias=AUTH_NAME_HEADER),
    db: Session = Depends(get_db),
) -> UserModel:
    """
    Zalogowany user z naglowkow auth proxy (OAuth).
    Serwisy dostaja juz tylko user.id, nigdy sesje.
    """
    if not email or not email.strip():
        raise HTTPException(status_code=401, detail="Unauthorized")
    return UserService(db).resolve_user(email, name)


def get_admin_user(user: UserModel = Depends(get_current_user)) -> UserModel:
    if not user.is_admin:
        raise HTTPException(status_code=403, detail="Admin access required")
    return user


def get_lock_service() -> LockService:
    return LockService()
