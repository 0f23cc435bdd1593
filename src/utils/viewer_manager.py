"""Viewer membership utilities."""

import logging
from datetime import datetime
from typing import List, Optional

import pytz
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from core.database import storage_guard
from core.result import Err, ErrorKind, Ok, Result
from models.viewer import ViewerModel
from schemas.owner import Owner, Viewer
from utils.converters import model_to_owner, model_to_viewer
from utils.owner_manager import INVALID_ACCESS_CODE_MESSAGE, OwnerManager

logger = logging.getLogger(__name__)


class ViewerManager:
    """Manages named viewers registered under an owner's access code."""

    def __init__(self, db: Session, owner_manager: Optional[OwnerManager] = None):
        self.db = db
        self.owner_manager = owner_manager or OwnerManager(db)

    @storage_guard
    def join(self, code: Optional[str], name: Optional[str] = None) -> Result[Owner]:
        """Resolve a code and register the viewer name under it.

        Joining again with the same name changes nothing. Without a name the
        code is only validated.

        Args:
            code: Access code of the owner to join.
            name: Viewer display name, matched exactly.

        Returns:
            Ok with the resolved Owner, or Err(NOT_FOUND) for an unknown code.
        """
        owner_model = self.owner_manager.get_model_by_code(code)
        if owner_model is None:
            return Err(ErrorKind.NOT_FOUND, INVALID_ACCESS_CODE_MESSAGE)

        if name and self._get_viewer(owner_model.owner_id, name) is None:
            viewer = ViewerModel(
                owner_id=owner_model.owner_id,
                name=name,
                joined_at=datetime.now(pytz.utc).isoformat(),
            )
            try:
                self.db.add(viewer)
                self.db.commit()
            except IntegrityError:
                # A concurrent join with the same name already inserted the row
                self.db.rollback()
            else:
                logger.info("Viewer joined owner %s", owner_model.owner_id)

        return Ok(model_to_owner(owner_model))

    @storage_guard
    def leave(self, code: Optional[str], name: Optional[str] = None) -> Result[Owner]:
        """Resolve a code and remove the viewer name from it.

        Removing a name that is not registered is not an error.

        Args:
            code: Access code of the owner to leave.
            name: Viewer display name, matched exactly.

        Returns:
            Ok with the resolved Owner, or Err(NOT_FOUND) for an unknown code.
        """
        owner_model = self.owner_manager.get_model_by_code(code)
        if owner_model is None:
            return Err(ErrorKind.NOT_FOUND, INVALID_ACCESS_CODE_MESSAGE)

        if name:
            removed = (
                self.db.query(ViewerModel)
                .filter(
                    ViewerModel.owner_id == owner_model.owner_id,
                    ViewerModel.name == name,
                )
                .delete(synchronize_session=False)
            )
            self.db.commit()
            if removed:
                logger.info("Viewer left owner %s", owner_model.owner_id)

        return Ok(model_to_owner(owner_model))

    @storage_guard
    def list_viewers(self, owner_id: str) -> Result[List[Viewer]]:
        """List the viewer roster of an owner in join order."""
        if self.owner_manager.get_model_by_id(owner_id) is None:
            return Err(ErrorKind.NOT_FOUND, "Owner not found")
        models = (
            self.db.query(ViewerModel)
            .filter(ViewerModel.owner_id == owner_id)
            .order_by(ViewerModel.id)
            .all()
        )
        return Ok([model_to_viewer(m) for m in models])

    def _get_viewer(self, owner_id: str, name: str) -> Optional[ViewerModel]:
        return (
            self.db.query(ViewerModel)
            .filter(ViewerModel.owner_id == owner_id, ViewerModel.name == name)
            .first()
        )
