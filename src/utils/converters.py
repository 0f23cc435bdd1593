"""Conversions between database models and schemas."""

from models.owner import OwnerModel
from models.viewer import ViewerModel
from schemas.owner import Owner, Viewer


def model_to_owner(model: OwnerModel) -> Owner:
    return Owner(
        owner_id=model.owner_id,
        username=model.username,
        access_code=model.access_code,
        created_at=model.created_at,
    )


def model_to_viewer(model: ViewerModel) -> Viewer:
    return Viewer(name=model.name, joined_at=model.joined_at)
