import logging
from datetime import datetime, timedelta, timezone

import bcrypt
import jwt
from sqlalchemy.orm import Session

from brostok.config import settings
from brostok.errors import AuthenticationError, ValidationError
from brostok.models.user import ROLES, User

logger = logging.getLogger(__name__)


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt()).decode()


def verify_password(password: str, hashed: str) -> bool:
    return bcrypt.checkpw(password.encode(), hashed.encode())


def create_access_token(user_id: int, email: str) -> str:
    payload = {
        "sub": str(user_id),
        "email": email,
        "exp": datetime.now(timezone.utc) + timedelta(hours=settings.ACCESS_TOKEN_EXPIRE_HOURS),
    }
    return jwt.encode(payload, settings.SECRET_KEY, algorithm="HS256")


def decode_token(token: str) -> dict | None:
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=["HS256"])
    except (jwt.ExpiredSignatureError, jwt.InvalidTokenError):
        return None


# Form validation

def validate_login(email: str, password: str) -> None:
    if not email or not password:
        raise ValidationError("Email dan password harus diisi")
    if len(password) < settings.MIN_PASSWORD_LENGTH:
        raise ValidationError(f"Password minimal {settings.MIN_PASSWORD_LENGTH} karakter")


def validate_registration(name: str, email: str, password: str, confirm_password: str, role: str) -> None:
    if not all([name, email, password, confirm_password, role]):
        raise ValidationError("Semua field harus diisi")
    if password != confirm_password:
        raise ValidationError("Password dan konfirmasi password tidak sama")
    if len(password) < settings.MIN_PASSWORD_LENGTH:
        raise ValidationError(f"Password minimal {settings.MIN_PASSWORD_LENGTH} karakter")
    if role not in ROLES:
        raise ValidationError(f"Role tidak dikenal: {role}")


# Users

def get_user_by_id(db: Session, user_id: int) -> User | None:
    return db.query(User).filter(User.id == user_id).first()


def get_user_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == email.strip().lower()).first()


def create_user(db: Session, email: str, password: str, name: str = "", role: str = "staff") -> User:
    if get_user_by_email(db, email):
        raise ValidationError(f"Email '{email}' sudah terdaftar")
    user = User(
        email=email.strip().lower(),
        name=name or email,
        password_hash=hash_password(password),
        role=role,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def register_user(
    db: Session, name: str, email: str, password: str, confirm_password: str, role: str = "staff"
) -> User:
    validate_registration(name, email, password, confirm_password, role)
    user = create_user(db, email=email, password=password, name=name, role=role)
    logger.info("Registered user %s (%s)", user.id, user.email)
    return user


def authenticate(db: Session, email: str, password: str) -> User:
    validate_login(email, password)
    user = get_user_by_email(db, email)
    if not user or not user.active or not verify_password(password, user.password_hash):
        raise AuthenticationError("Email atau password salah")
    return user


def ensure_default_admin(db: Session) -> User:
    """Create the default admin user if no users exist; return the first admin."""
    if db.query(User).count() == 0:
        create_user(
            db,
            email=settings.DEFAULT_ADMIN_EMAIL,
            password=settings.DEFAULT_ADMIN_PASSWORD,
            name="Admin User",
            role="admin",
        )
        logger.info("Created default admin %s", settings.DEFAULT_ADMIN_EMAIL)
    return db.query(User).filter(User.role == "admin").order_by(User.id).first()
