"""Viewer roster route for the owner's settings screen."""

from typing import List

from fastapi import APIRouter, Depends

from api.errors import unwrap
from api.routes.auth import get_current_owner_id
from core.dependencies import ViewerManagerDep
from schemas.owner import Viewer

router = APIRouter(prefix="/viewers", tags=["Viewers"])


@router.get("", response_model=List[Viewer], summary="List my viewers")
def list_viewers(
    viewer_manager: ViewerManagerDep,
    owner_id: str = Depends(get_current_owner_id),
) -> List[Viewer]:
    return unwrap(viewer_manager.list_viewers(owner_id))
