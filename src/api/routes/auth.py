"""Authentication routes.

This module handles owner registration and login, the credential-free
join/leave endpoints for viewers, and the session dependency used by every
owner-only route.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from api.errors import http_error, unwrap
from core.dependencies import (
    OwnerManagerDep,
    SessionAuthenticatorDep,
    ViewerManagerDep,
)
from core.result import Err, ErrorKind
from schemas.auth import (
    JoinResponse,
    LoginRequest,
    LoginResponse,
    MembershipRequest,
    MessageResponse,
    RegisterRequest,
    RegisterResponse,
)
from utils.session_authenticator import INVALID_TOKEN_MESSAGE

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Auth"])

# Missing and malformed headers are told apart below, so no auto 403
security = HTTPBearer(auto_error=False)


def get_current_owner_id(
    request: Request,
    authenticator: SessionAuthenticatorDep,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> str:
    """Resolve the owner behind the bearer token of a request.

    Args:
        request: Incoming request, used to detect a missing header.
        authenticator: Injected SessionAuthenticator instance.
        credentials: Bearer credentials, None if absent or not a bearer scheme.

    Returns:
        The authenticated owner_id.

    Raises:
        HTTPException: 401 if the header is missing or the token is invalid.
    """
    if credentials is None:
        if request.headers.get("Authorization"):
            raise http_error(Err(ErrorKind.INVALID_TOKEN, INVALID_TOKEN_MESSAGE))
        raise http_error(Err(ErrorKind.AUTHENTICATION_MISSING, "Access denied"))
    return unwrap(authenticator.verify(credentials.credentials))


@router.post("/register", response_model=RegisterResponse, summary="Register an owner")
def register(req: RegisterRequest, owner_manager: OwnerManagerDep) -> RegisterResponse:
    """Register a new owner and hand back the shareable access code.

    Raises:
        HTTPException: 409 if the username is taken.
    """
    code = unwrap(owner_manager.register(req.username, req.password))
    return RegisterResponse(access_code=code)


@router.post("/login", response_model=LoginResponse, summary="Owner login")
def login(
    req: LoginRequest,
    owner_manager: OwnerManagerDep,
    authenticator: SessionAuthenticatorDep,
) -> LoginResponse:
    """Login with username and password.

    Returns:
        LoginResponse with a session token and the owner's access code.

    Raises:
        HTTPException: 401 with the same message for any credential failure.
    """
    owner = unwrap(owner_manager.verify_login(req.username, req.password))
    token = authenticator.issue(owner.owner_id)
    return LoginResponse(token=token, access_code=owner.access_code)


@router.post("/join", response_model=JoinResponse, summary="Join as a viewer")
def join(req: MembershipRequest, viewer_manager: ViewerManagerDep) -> JoinResponse:
    """Resolve an access code and, if a name is given, record the viewer."""
    owner = unwrap(viewer_manager.join(req.code, req.name))
    return JoinResponse(access_code=owner.access_code)


@router.post("/leave", response_model=MessageResponse, summary="Leave as a viewer")
def leave(req: MembershipRequest, viewer_manager: ViewerManagerDep) -> MessageResponse:
    """Resolve an access code and, if a name is given, drop the viewer."""
    unwrap(viewer_manager.leave(req.code, req.name))
    return MessageResponse(message="Left family")
