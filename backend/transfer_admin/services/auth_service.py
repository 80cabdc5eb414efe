import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from transfer_admin.core.exceptions import AuthError, ConflictError, ValidationError
from transfer_admin.core.security import create_access_token, dummy_verify, get_password_hash, verify_password
from transfer_admin.models.enums import Role
from transfer_admin.models.user import User
from transfer_admin.services import validation

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6
INVALID_CREDENTIALS = "Geçersiz e-posta veya şifre"


def normalize_email(email: str) -> str:
    return email.strip().lower()


class AuthService:
    def __init__(self, db: Session):
        self.db = db

    def _get_by_email(self, email: str) -> User | None:
        return self.db.query(User).filter(User.email == email).first()

    def login(self, email: str | None, password: str | None) -> tuple[User, str]:
        """Return (user, bearer token).

        Unknown login and wrong password fail with the same message.
        """
        if validation.is_blank(email) or not password:
            raise ValidationError("E-posta ve şifre zorunludur")
        login = normalize_email(email)
        user = self._get_by_email(login)
        if not user:
            dummy_verify()
            logger.warning("Login failed for unknown account %r", login)
            raise AuthError(INVALID_CREDENTIALS)
        if not verify_password(password, user.hashed_password):
            logger.warning("Login failed for %r: wrong password", login)
            raise AuthError(INVALID_CREDENTIALS)
        token = create_access_token(user_id=user.id, email=user.email, role=user.role)
        return user, token

    def register(self, email: str | None, password: str | None) -> User:
        if validation.is_blank(email) or not password:
            raise ValidationError("E-posta ve şifre zorunludur")
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError("Şifre en az 6 karakter olmalıdır", field="password")
        login = normalize_email(email)
        if self._get_by_email(login):
            raise ConflictError("Bu e-posta adresi zaten kayıtlı")
        # Self-registration always yields an admin; accountants come from seed data
        user = User(email=login, hashed_password=get_password_hash(password), role=Role.admin.value)
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError:
            # Lost a race with a concurrent registration of the same e-mail
            self.db.rollback()
            raise ConflictError("Bu e-posta adresi zaten kayıtlı")
        self.db.refresh(user)
        logger.info("Registered user %s (%s)", user.id, user.email)
        return user
