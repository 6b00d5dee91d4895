"""Authentication service for JWT and password handling."""

import logging
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.config import Settings, get_settings
from src.exceptions import DuplicateEmailError, InvalidTokenError
from src.models.user import User

logger = logging.getLogger(__name__)

settings = get_settings()

# Password hashing context
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.bcrypt_rounds,
)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        # Stored value is not a hash this context recognises
        logger.warning("Unrecognised password hash format")
        return False


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


class TokenService:
    """Issues and verifies signed access tokens.

    The only claim that matters is ``sub``, the user id. Tokens are issued
    without an ``exp`` claim unless ``expiration_minutes`` is set.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        expiration_minutes: int | None = None,
    ):
        self.secret = secret
        self.algorithm = algorithm
        self.expiration_minutes = expiration_minutes

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenService":
        """Build a token service from application settings."""
        return cls(
            secret=settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
            expiration_minutes=settings.jwt_expiration_minutes,
        )

    def issue(self, user_id: int) -> str:
        """Create a signed token for ``user_id``."""
        now = datetime.now(UTC)
        to_encode = {"sub": str(user_id), "iat": now}
        if self.expiration_minutes is not None:
            to_encode["exp"] = now + timedelta(minutes=self.expiration_minutes)
        return jwt.encode(to_encode, self.secret, algorithm=self.algorithm)

    def verify(self, token: str | None) -> int:
        """Return the user id carried by ``token``.

        Raises:
            InvalidTokenError: the token is missing, malformed, tampered with,
                expired, or does not carry a user id.
        """
        if not token:
            raise InvalidTokenError()
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except JWTError as e:
            logger.debug(f"Rejected token: {e}")
            raise InvalidTokenError() from e

        subject = payload.get("sub")
        try:
            return int(subject)
        except (TypeError, ValueError) as e:
            logger.debug(f"Token subject is not a user id: {subject!r}")
            raise InvalidTokenError() from e


def get_user_by_email(db: Session, email: str) -> User | None:
    """Get a user by email."""
    return db.query(User).filter(User.email == email).first()


def authenticate_user(db: Session, email: str, password: str) -> User | None:
    """Authenticate a user by email and password."""
    user = get_user_by_email(db, email)
    if not user:
        return None
    if not verify_password(password, user.password_hash):
        return None
    return user


def create_user(db: Session, username: str, email: str, password: str) -> User:
    """Create a new user.

    Raises:
        DuplicateEmailError: a user with this email already exists.
    """
    if get_user_by_email(db, email):
        raise DuplicateEmailError()

    user = User(username=username, email=email, password_hash=get_password_hash(password))
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        # Lost a race with a concurrent registration for the same email
        db.rollback()
        if get_user_by_email(db, email):
            raise DuplicateEmailError() from e
        raise
    db.refresh(user)
    logger.info(f"Registered user {user.id}")
    return user
