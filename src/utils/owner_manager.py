"""Owner management utilities.

This module is the credential store: it owns owner identity records, password
hashing and access code allocation, and resolves access codes and ids back to
owners.
"""

import functools
import logging
import uuid
from datetime import datetime
from typing import Optional

import bcrypt
import pytz
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from config import ACCESS_CODE_MAX_ATTEMPTS, BCRYPT_ROUNDS
from core.database import STORAGE_FAILURE_MESSAGE, storage_guard
from core.result import Err, ErrorKind, Ok, Result
from models.owner import OwnerModel
from schemas.owner import Owner
from utils.access_code import generate_code, is_well_formed
from utils.converters import model_to_owner

logger = logging.getLogger(__name__)

# bcrypt ignores everything past 72 bytes
BCRYPT_MAX_BYTES = 72

INVALID_CREDENTIALS_MESSAGE = "Invalid credentials"
INVALID_ACCESS_CODE_MESSAGE = "Invalid access code"


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


@functools.lru_cache(maxsize=None)
def _dummy_hash(rounds: int) -> bytes:
    """Hash checked when the username is unknown, so both login failures cost the same."""
    return bcrypt.hashpw(b"no-such-owner", bcrypt.gensalt(rounds=rounds))


def _hash_rounds(password_hash: str) -> int:
    """Read the cost factor out of a "$2b$<rounds>$..." bcrypt hash."""
    return int(password_hash.split("$")[2])


# Built at import so no login request pays for it
_dummy_hash(BCRYPT_ROUNDS)


class OwnerManager:
    """Manages owner persistence and credential checks using SQLAlchemy."""

    def __init__(
        self,
        db: Session,
        bcrypt_rounds: int = BCRYPT_ROUNDS,
        max_code_attempts: int = ACCESS_CODE_MAX_ATTEMPTS,
    ):
        """Initialize OwnerManager.

        Args:
            db: SQLAlchemy Session.
            bcrypt_rounds: Cost factor for new password hashes.
            max_code_attempts: How many access codes registration tries.
        """
        self.db = db
        self.bcrypt_rounds = bcrypt_rounds
        self.max_code_attempts = max_code_attempts
        _dummy_hash(bcrypt_rounds)

    def hash_password(self, password: str) -> str:
        """Hash a password using bcrypt.

        Args:
            password: Plain text password.

        Returns:
            Hashed password (bcrypt hash string).
        """
        salt = bcrypt.gensalt(rounds=self.bcrypt_rounds)
        return bcrypt.hashpw(_password_bytes(password), salt).decode("utf-8")

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        """Verify a password against a bcrypt hash.

        Args:
            plain_password: Plain text password to verify.
            hashed_password: Bcrypt hash string to verify against.

        Returns:
            True if password matches, False otherwise.
        """
        try:
            return bcrypt.checkpw(
                _password_bytes(plain_password), hashed_password.encode("utf-8")
            )
        except ValueError:
            logger.error("Stored password hash is malformed")
            return False

    @storage_guard
    def register(self, username: str, password: str) -> Result[str]:
        """Create a new owner with a fresh access code.

        The username check up front is only a fast path. The unique indexes on
        username and access_code decide races: a violation is re-checked to
        tell a taken username from a colliding code, and a colliding code is
        replaced by a new one.

        Args:
            username: Username for the new owner.
            password: Plain text password.

        Returns:
            Ok with the new access code, or Err(DUPLICATE_USERNAME).
        """
        if self._get_model_by_username(username) is not None:
            logger.info("Registration rejected, username taken: %s", username)
            return Err(ErrorKind.DUPLICATE_USERNAME, "Username already exists")

        password_hash = self.hash_password(password)

        for attempt in range(1, self.max_code_attempts + 1):
            code = generate_code()
            if self._get_model_by_code(code) is not None:
                logger.debug("Access code collision on attempt %d", attempt)
                continue

            model = OwnerModel(
                owner_id=uuid.uuid4().hex,
                username=username,
                password_hash=password_hash,
                access_code=code,
                created_at=datetime.now(pytz.utc).isoformat(),
            )
            try:
                self.db.add(model)
                self.db.commit()
            except IntegrityError:
                self.db.rollback()
                if self._get_model_by_username(username) is not None:
                    logger.info("Registration lost race for username: %s", username)
                    return Err(ErrorKind.DUPLICATE_USERNAME, "Username already exists")
                logger.warning("Access code taken at insert time, retrying")
                continue

            logger.info("Registered owner: %s", username)
            return Ok(code)

        logger.error(
            "No unused access code after %d attempts", self.max_code_attempts
        )
        return Err(ErrorKind.STORAGE_FAILURE, STORAGE_FAILURE_MESSAGE)

    @storage_guard
    def verify_login(self, username: str, password: str) -> Result[Owner]:
        """Check a username/password pair.

        An unknown username and a wrong password give the same error, and both
        run one bcrypt check.

        Args:
            username: Username to look up.
            password: Plain text password.

        Returns:
            Ok with the Owner, or Err(INVALID_CREDENTIALS).
        """
        model = self._get_model_by_username(username)
        if model is None:
            bcrypt.checkpw(_password_bytes(password), _dummy_hash(self.bcrypt_rounds))
            valid = False
        else:
            valid = self.verify_password(password, model.password_hash)

        if not valid:
            logger.info("Login failed")
            return Err(ErrorKind.INVALID_CREDENTIALS, INVALID_CREDENTIALS_MESSAGE)

        if _hash_rounds(model.password_hash) != self.bcrypt_rounds:
            # Keep stored costs equal to the dummy hash cost used for unknown users
            model.password_hash = self.hash_password(password)
            self.db.commit()
            logger.info("Rehashed password for owner: %s", model.owner_id)

        logger.info("Login succeeded for owner: %s", model.owner_id)
        return Ok(model_to_owner(model))

    @storage_guard
    def find_by_code(self, code: Optional[str]) -> Result[Owner]:
        """Resolve an access code to its owner.

        Args:
            code: Access code, surrounding whitespace ignored.

        Returns:
            Ok with the Owner, or Err(NOT_FOUND).
        """
        model = self.get_model_by_code(code)
        if model is None:
            return Err(ErrorKind.NOT_FOUND, INVALID_ACCESS_CODE_MESSAGE)
        return Ok(model_to_owner(model))

    @storage_guard
    def find_by_id(self, owner_id: str) -> Result[Owner]:
        model = self.get_model_by_id(owner_id)
        if model is None:
            return Err(ErrorKind.NOT_FOUND, "Owner not found")
        return Ok(model_to_owner(model))

    def get_model_by_code(self, code: Optional[str]) -> Optional[OwnerModel]:
        """Look up the owner row for a code; malformed codes never hit the database."""
        if not code:
            return None
        code = code.strip()
        if not is_well_formed(code):
            return None
        return self._get_model_by_code(code)

    def get_model_by_id(self, owner_id: str) -> Optional[OwnerModel]:
        return (
            self.db.query(OwnerModel).filter(OwnerModel.owner_id == owner_id).first()
        )

    def _get_model_by_username(self, username: str) -> Optional[OwnerModel]:
        return (
            self.db.query(OwnerModel).filter(OwnerModel.username == username).first()
        )

    def _get_model_by_code(self, code: str) -> Optional[OwnerModel]:
        return (
            self.db.query(OwnerModel).filter(OwnerModel.access_code == code).first()
        )
