import logging

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from backend.auth.jwt_handler import TokenService
from backend.auth.passwords import PasswordHasher
from backend.core.errors import AuthError, ConflictError, ValidationError
from backend.models.admin import Admin
from backend.models.user import User
from backend.schemas.auth import AdminLoginRequest, LoginRequest, RegisterRequest

logger = logging.getLogger(__name__)

DEFAULT_ROLE = "student"
ADMIN_ROLE = "admin"


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


class AuthService:
    """Registration and login flows for students and admins."""

    def __init__(self, db: Session, hasher: PasswordHasher, tokens: TokenService):
        self.db = db
        self.hasher = hasher
        self.tokens = tokens

    def register(self, data: RegisterRequest) -> User:
        fields = (data.full_name, data.student_id, data.email, data.phone)
        # Passwords are taken verbatim; only an empty one is missing.
        if any(_is_blank(value) for value in fields) or not data.password:
            raise ValidationError("All fields are required")

        student_id = data.student_id.strip()
        email = data.email.strip()

        existing = self.db.query(User).filter(
            or_(User.student_id == student_id, User.email == email)
        ).first()
        if existing is not None:
            raise ConflictError("User already exists")

        user = User(
            full_name=data.full_name.strip(),
            student_id=student_id,
            email=email,
            phone=data.phone.strip(),
            password=self.hasher.hash(data.password),
            role=DEFAULT_ROLE,
        )
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as exc:
            # A concurrent registration won the race past the pre-check.
            self.db.rollback()
            raise ConflictError("User already exists") from exc
        self.db.refresh(user)

        logger.info("Registered user %s", user.student_id)
        return user

    def login(self, data: LoginRequest) -> tuple[str, User]:
        identifier = (data.user_id_or_email or "").strip()
        user = None
        if identifier:
            user = self.db.query(User).filter(
                or_(User.student_id == identifier, User.email == identifier)
            ).first()

        if user is None or not self.hasher.verify(data.password, user.password):
            logger.warning("Failed login for identifier %r", identifier)
            raise AuthError("Invalid credentials")

        token = self.tokens.issue({"id": user.id, "studentId": user.student_id, "role": user.role})
        logger.info("User %s logged in", user.student_id)
        return token, user

    def admin_login(self, data: AdminLoginRequest) -> tuple[str, Admin]:
        admin = None
        if data.username:
            admin = self.db.query(Admin).filter(Admin.username == data.username).first()

        if admin is None or not self.hasher.verify(data.password, admin.password):
            logger.warning("Failed admin login for username %r", data.username)
            raise AuthError("Invalid admin credentials")

        token = self.tokens.issue({"id": admin.id, "username": admin.username, "role": ADMIN_ROLE})
        logger.info("Admin %s logged in", admin.username)
        return token, admin
