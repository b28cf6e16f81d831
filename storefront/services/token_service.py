import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import bcrypt
from jose import JWTError, jwt

from storefront.config.settings import Settings, get_settings
from storefront.core.domain import AuthenticationException

logger = logging.getLogger(__name__)


class TokenService:
    """
    Session token and password hashing service.

    The signed token is the whole session: it is stored in an HTTP-only
    cookie and carries the user id as `sub`.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

        self.SECRET_KEY = self.settings.JWT_SECRET_KEY
        self.ALGORITHM = self.settings.JWT_ALGORITHM
        self.ACCESS_TOKEN_EXPIRE_MINUTES = self.settings.ACCESS_TOKEN_EXPIRE_MINUTES

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        """Check a plain password against its bcrypt hash."""
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))

    def get_password_hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self.settings.BCRYPT_ROUNDS)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def create_access_token(self, data: Dict[str, Any], expires_delta: Optional[timedelta] = None) -> str:
        """
        Create a signed session token.

        Args:
            data: Claims to include; `sub` must be the user id as a string
            expires_delta: Lifetime override (defaults to ACCESS_TOKEN_EXPIRE_MINUTES)
        """
        to_encode = data.copy()
        now = datetime.now(timezone.utc)
        expire = now + (expires_delta or timedelta(minutes=self.ACCESS_TOKEN_EXPIRE_MINUTES))

        to_encode.update({"exp": expire, "iat": now, "token_type": "access"})
        return jwt.encode(to_encode, self.SECRET_KEY, algorithm=self.ALGORITHM)

    def decode_token(self, token: str) -> Dict[str, Any]:
        """
        Decode and verify a session token.

        Raises:
            AuthenticationException: bad signature, expired, or wrong token type
        """
        try:
            payload = jwt.decode(token, self.SECRET_KEY, algorithms=[self.ALGORITHM])
        except JWTError as e:
            logger.debug(f"Rejected session token: {e}")
            raise AuthenticationException("Invalid or expired session") from e

        if payload.get("token_type") != "access" or not payload.get("sub"):
            raise AuthenticationException("Invalid or expired session")
        return payload

    def get_user_id(self, token: str) -> int:
        payload = self.decode_token(token)
        try:
            return int(payload["sub"])
        except (TypeError, ValueError) as e:
            raise AuthenticationException("Invalid or expired session") from e
