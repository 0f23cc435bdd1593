"""Schedule record access.

One RecordManager serves one record kind (classes, exams or notes). Writes are
always scoped to the authenticated owner; reads are scoped either to that
owner or to the owner an access code resolves to.
"""

import logging
import secrets
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Type

import pytz
from sqlalchemy.orm import Session

from core.database import storage_guard
from core.result import Err, ErrorKind, Ok, Result
from models.base import Base
from models.class_session import ClassSessionModel
from models.exam import ExamModel
from models.note import NoteModel
from schemas.records import (
    ClassCreate,
    ClassRecord,
    ExamCreate,
    ExamRecord,
    NoteCreate,
    NoteRecord,
    RecordCreate,
    RecordRead,
)
from utils.owner_manager import OwnerManager

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecordKind:
    """Binds a record kind's URL segment to its table and schemas."""

    name: str
    model: Type[Base]
    create_schema: Type[RecordCreate]
    read_schema: Type[RecordRead]


CLASS_KIND = RecordKind("classes", ClassSessionModel, ClassCreate, ClassRecord)
EXAM_KIND = RecordKind("exams", ExamModel, ExamCreate, ExamRecord)
NOTE_KIND = RecordKind("notes", NoteModel, NoteCreate, NoteRecord)

RECORD_KINDS = (CLASS_KIND, EXAM_KIND, NOTE_KIND)


class RecordManager:
    """Manages one kind of schedule record using SQLAlchemy."""

    def __init__(
        self,
        db: Session,
        kind: RecordKind,
        owner_manager: Optional[OwnerManager] = None,
    ):
        """Initialize RecordManager.

        Args:
            db: SQLAlchemy Session.
            kind: The record kind this manager serves.
            owner_manager: Credential store used to resolve owners and codes.
        """
        self.db = db
        self.kind = kind
        self.owner_manager = owner_manager or OwnerManager(db)

    @storage_guard
    def create(
        self, owner_id: str, payload: RecordCreate
    ) -> Result[RecordRead]:
        """Create a record owned by the authenticated owner.

        The payload is an already validated instance of the kind's create
        schema, which has no owner field, so the stored owner is always
        ``owner_id``.

        Args:
            owner_id: Owner from the verified session token.
            payload: Instance of the kind's create schema.

        Returns:
            Ok with the created record, or Err(NOT_FOUND) if the owner is gone.

        Raises:
            TypeError: If payload is not the kind's create schema.
        """
        if not isinstance(payload, self.kind.create_schema):
            raise TypeError(
                f"{self.kind.name} payload must be {self.kind.create_schema.__name__}, "
                f"got {type(payload).__name__}"
            )
        if self.owner_manager.get_model_by_id(owner_id) is None:
            return Err(ErrorKind.NOT_FOUND, "Owner not found")

        fields = payload.model_dump(mode="json")
        model = self.kind.model(
            **fields,
            record_id=secrets.token_hex(12),
            owner_id=owner_id,
            created_at=datetime.now(pytz.utc).isoformat(),
        )
        self.db.add(model)
        self.db.commit()
        self.db.refresh(model)
        logger.info(
            "Created %s record %s for owner %s", self.kind.name, model.record_id, owner_id
        )
        return Ok(self.kind.read_schema.model_validate(model))

    @storage_guard
    def list_owned(self, owner_id: str) -> Result[List[RecordRead]]:
        """List all records of an owner, oldest first."""
        return Ok(self._list_for_owner(owner_id))

    @storage_guard
    def list_public(self, code: Optional[str]) -> Result[List[RecordRead]]:
        """List the records of the owner an access code resolves to.

        Args:
            code: Access code shared by the owner.

        Returns:
            Ok with the records, or Err(NOT_FOUND) for an unknown code.
        """
        owner_model = self.owner_manager.get_model_by_code(code)
        if owner_model is None:
            return Err(ErrorKind.NOT_FOUND, "Invalid access code")
        return Ok(self._list_for_owner(owner_model.owner_id))

    @storage_guard
    def delete(self, owner_id: str, record_id: str) -> Result[None]:
        """Delete a record if it belongs to the owner.

        Unknown ids and other owners' ids are acknowledged the same way as a
        real delete so callers learn nothing about records they do not own.
        """
        deleted = (
            self.db.query(self.kind.model)
            .filter(
                self.kind.model.record_id == record_id,
                self.kind.model.owner_id == owner_id,
            )
            .delete(synchronize_session=False)
        )
        self.db.commit()
        if deleted:
            logger.info(
                "Deleted %s record %s for owner %s", self.kind.name, record_id, owner_id
            )
        return Ok(None)

    def _list_for_owner(self, owner_id: str) -> List[RecordRead]:
        models = (
            self.db.query(self.kind.model)
            .filter(self.kind.model.owner_id == owner_id)
            .order_by(self.kind.model.created_at)
            .all()
        )
        return [self.kind.read_schema.model_validate(m) for m in models]
