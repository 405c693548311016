from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from storefront.data.models.user import UserModel
from storefront.repos.user_repo import UserRepo
from storefront.utils.settings import ADMIN_EMAILS
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class UserService:
    def __init__(self, db: Session):
        self.repo = UserRepo(db)

    def resolve_user(self, email: str, name: str | None = None) -> UserModel:
        """
        Tozsamosc przychodzi z OAuth (przez proxy) i jest zaufana.
        Pierwsze logowanie tworzy usera.
        """
        email = email.strip().lower()
        existing = self.repo.get_by_email(email)
        if existing:
            return existing

        user = UserModel(email=email, name=name, is_admin=email in ADMIN_EMAILS)
        try:
            created = self.repo.create_user(user)
        except IntegrityError:
            # rownolegle pierwsze logowanie, user juz jest
            self.repo.rollback()
            return self.repo.get_by_email(email)

        logger.info(f"Provisioned user {created.id} ({email}), admin={created.is_admin}")
        return created
