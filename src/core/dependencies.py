"""Dependency injection module for FastAPI.

This module provides dependency injection functions for FastAPI routes. Every
component gets its storage session and settings here, at construction.
"""

import logging
from typing import Annotated, Callable

from fastapi import Depends
from sqlalchemy.orm import Session

import config
from core.database import get_db
from utils import owner_manager
from utils import record_manager
from utils import session_authenticator
from utils import viewer_manager

logger = logging.getLogger(__name__)

# Singleton for SessionAuthenticator (holds only immutable settings)
_session_authenticator_instance: session_authenticator.SessionAuthenticator = None


def get_owner_manager(db: Session = Depends(get_db)) -> owner_manager.OwnerManager:
    """Get OwnerManager instance with request-scoped DB session.

    Args:
        db: Database session.

    Returns:
        OwnerManager instance.
    """
    return owner_manager.OwnerManager(
        db,
        bcrypt_rounds=config.BCRYPT_ROUNDS,
        max_code_attempts=config.ACCESS_CODE_MAX_ATTEMPTS,
    )


def get_viewer_manager(
    db: Session = Depends(get_db),
    owners: owner_manager.OwnerManager = Depends(get_owner_manager),
) -> viewer_manager.ViewerManager:
    """Get ViewerManager instance with request-scoped DB session."""
    return viewer_manager.ViewerManager(db, owners)


def get_session_authenticator() -> session_authenticator.SessionAuthenticator:
    """Get SessionAuthenticator singleton instance.

    Returns:
        SessionAuthenticator instance (singleton).
    """
    global _session_authenticator_instance
    if _session_authenticator_instance is None:
        if config.JWT_SECRET_KEY == config.DEFAULT_JWT_SECRET_KEY:
            logger.warning("JWT_SECRET_KEY is not set, using the development default")
        _session_authenticator_instance = session_authenticator.SessionAuthenticator(
            secret_key=config.JWT_SECRET_KEY,
            algorithm=config.JWT_ALGORITHM,
            expire_minutes=config.ACCESS_TOKEN_EXPIRE_MINUTES,
        )
    return _session_authenticator_instance


def record_manager_dependency(
    kind: record_manager.RecordKind,
) -> Callable[..., record_manager.RecordManager]:
    """Build a dependency that yields a RecordManager for one record kind."""

    def get_record_manager(
        db: Session = Depends(get_db),
        owners: owner_manager.OwnerManager = Depends(get_owner_manager),
    ) -> record_manager.RecordManager:
        return record_manager.RecordManager(db, kind, owners)

    get_record_manager.__name__ = f"get_{kind.name}_manager"
    return get_record_manager


# Type aliases for dependency injection
OwnerManagerDep = Annotated[
    owner_manager.OwnerManager, Depends(get_owner_manager)
]
ViewerManagerDep = Annotated[
    viewer_manager.ViewerManager, Depends(get_viewer_manager)
]
SessionAuthenticatorDep = Annotated[
    session_authenticator.SessionAuthenticator, Depends(get_session_authenticator)
]
