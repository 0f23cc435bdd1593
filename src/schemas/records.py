"""Schedule record schema definitions.

Each record kind has a create model (what the owner may send) and a read
model (what any caller gets back). Create models carry no owner field and
ignore unknown keys, so the owner of a new record can only come from the
authenticated session.
"""

import datetime as dt
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class RecordCreate(BaseModel):
    model_config = ConfigDict(extra="ignore")


class RecordRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str = Field(validation_alias=AliasChoices("record_id", "id"))
    created_at: str


class ClassCreate(RecordCreate):
    subject: str = Field(min_length=1, description="Subject name, e.g. Math")
    weekday: int = Field(ge=1, le=7, description="1 = Monday, 7 = Sunday")
    start_hour: int = Field(ge=0, le=23)
    start_minute: int = Field(default=0, ge=0, le=59)
    end_hour: int = Field(ge=0, le=23)
    end_minute: int = Field(default=0, ge=0, le=59)
    is_break: bool = False


class ClassRecord(RecordRead):
    subject: str
    weekday: int
    start_hour: int
    start_minute: int
    end_hour: int
    end_minute: int
    is_break: bool


class ExamCreate(RecordCreate):
    subject: str = Field(min_length=1)
    date: dt.date
    time_hour: Optional[int] = Field(default=None, ge=0, le=23)
    time_minute: Optional[int] = Field(default=None, ge=0, le=59)
    syllabus: str = ""


class ExamRecord(RecordRead):
    subject: str
    date: str
    time_hour: Optional[int] = None
    time_minute: Optional[int] = None
    syllabus: str


class NoteCreate(RecordCreate):
    content: str = Field(min_length=1)


class NoteRecord(RecordRead):
    content: str
