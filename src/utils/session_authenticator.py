"""Session token issuing and verification.

Owners prove their identity with a signed JWT that carries only their
owner_id as subject. Every way a token can be wrong collapses into one error
so callers cannot tell an expired token from a forged one.
"""

import logging
from datetime import datetime, timedelta
from typing import Optional

import pytz
from jose import JWTError, jwt

from config import ACCESS_TOKEN_EXPIRE_MINUTES, JWT_ALGORITHM, JWT_SECRET_KEY
from core.exceptions import ConfigurationError
from core.result import Err, ErrorKind, Ok, Result

logger = logging.getLogger(__name__)

INVALID_TOKEN_MESSAGE = "Invalid token"


class SessionAuthenticator:
    """Issues and verifies owner session tokens."""

    def __init__(
        self,
        secret_key: str = JWT_SECRET_KEY,
        algorithm: str = JWT_ALGORITHM,
        expire_minutes: int = ACCESS_TOKEN_EXPIRE_MINUTES,
    ):
        """Initialize SessionAuthenticator.

        Args:
            secret_key: Key used to sign and verify tokens.
            algorithm: JWT signing algorithm.
            expire_minutes: Token lifetime from issuance.

        Raises:
            ConfigurationError: If the key is empty or the lifetime is not positive.
        """
        if not secret_key:
            raise ConfigurationError("JWT secret key must not be empty")
        if expire_minutes <= 0:
            raise ConfigurationError("Token lifetime must be positive")
        self._secret_key = secret_key
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes

    def issue(self, owner_id: str, now: Optional[datetime] = None) -> str:
        """Create a session token for an owner.

        Args:
            owner_id: The owner the token is bound to.
            now: Issuance time, defaults to the current UTC time.

        Returns:
            Encoded JWT token string.
        """
        issued_at = now or datetime.now(pytz.utc)
        claims = {
            "sub": owner_id,
            "iat": issued_at,
            "exp": issued_at + timedelta(minutes=self.expire_minutes),
        }
        return jwt.encode(claims, self._secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> Result[str]:
        """Verify a session token.

        Args:
            token: Encoded JWT token string.

        Returns:
            Ok with the owner_id, or Err(INVALID_TOKEN).
        """
        try:
            payload = jwt.decode(token, self._secret_key, algorithms=[self.algorithm])
        except JWTError:
            return Err(ErrorKind.INVALID_TOKEN, INVALID_TOKEN_MESSAGE)

        owner_id = payload.get("sub")
        if not isinstance(owner_id, str) or not owner_id:
            return Err(ErrorKind.INVALID_TOKEN, INVALID_TOKEN_MESSAGE)
        return Ok(owner_id)
