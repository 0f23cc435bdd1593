"""Schedule record routes.

Owner routes (``/classes``, ``/exams``, ``/notes``) list, create and delete
the caller's own records. Public routes (``/public/<kind>?code=``) give
viewers a read-only list scoped to the owner behind an access code. Both are
built once per record kind.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends

from api.errors import unwrap
from api.routes.auth import get_current_owner_id
from core.dependencies import record_manager_dependency
from schemas.auth import MessageResponse
from utils.record_manager import RECORD_KINDS, RecordKind, RecordManager


def build_owner_router(kind: RecordKind) -> APIRouter:
    """Create the session-authenticated routes for one record kind."""
    router = APIRouter(prefix=f"/{kind.name}", tags=[kind.name.title()])
    get_manager = record_manager_dependency(kind)

    @router.get("", response_model=List[kind.read_schema], summary=f"List my {kind.name}")
    def list_owned(
        manager: RecordManager = Depends(get_manager),
        owner_id: str = Depends(get_current_owner_id),
    ):
        return unwrap(manager.list_owned(owner_id))

    @router.post("", response_model=kind.read_schema, summary=f"Create one of my {kind.name}")
    def create(
        payload: kind.create_schema,
        manager: RecordManager = Depends(get_manager),
        owner_id: str = Depends(get_current_owner_id),
    ):
        return unwrap(manager.create(owner_id, payload))

    @router.delete(
        "/{record_id}", response_model=MessageResponse, summary=f"Delete one of my {kind.name}"
    )
    def delete(
        record_id: str,
        manager: RecordManager = Depends(get_manager),
        owner_id: str = Depends(get_current_owner_id),
    ) -> MessageResponse:
        unwrap(manager.delete(owner_id, record_id))
        return MessageResponse(message="Deleted")

    return router


def build_public_router() -> APIRouter:
    """Create the code-scoped read-only routes for all record kinds."""
    router = APIRouter(prefix="/public", tags=["Public"])

    for kind in RECORD_KINDS:
        get_manager = record_manager_dependency(kind)

        def list_public(
            code: Optional[str] = None,
            manager: RecordManager = Depends(get_manager),
        ):
            return unwrap(manager.list_public(code))

        router.add_api_route(
            f"/{kind.name}",
            list_public,
            methods=["GET"],
            response_model=List[kind.read_schema],
            summary=f"List {kind.name} by access code",
            name=f"list_public_{kind.name}",
        )

    return router


owner_routers = [build_owner_router(kind) for kind in RECORD_KINDS]
public_router = build_public_router()
