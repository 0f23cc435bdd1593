"""Schedule record gateway: ownership, public reads and deletes."""

import datetime as dt
from unittest import mock

import pytest
from sqlalchemy.exc import OperationalError

from core.result import Err, ErrorKind, Ok
from models.class_session import ClassSessionModel
from schemas.records import ClassCreate, ExamCreate, NoteCreate
from utils.record_manager import CLASS_KIND, EXAM_KIND, NOTE_KIND, RecordManager

MATH = {
    "subject": "Math",
    "weekday": 1,
    "start_hour": 8,
    "start_minute": 0,
    "end_hour": 8,
    "end_minute": 45,
}


@pytest.fixture
def classes(db, owners):
    return RecordManager(db, CLASS_KIND, owners)


def test_create_and_list_owned(classes, registered):
    alice = registered["alice"]
    created = classes.create(alice.owner_id, ClassCreate(**MATH)).value
    assert created.subject == "Math"
    assert created.is_break is False
    assert classes.list_owned(alice.owner_id) == Ok([created])


def test_forged_owner_id_is_ignored(classes, registered, db):
    alice, bob = registered["alice"], registered["bob"]
    forged = ClassCreate.model_validate({**MATH, "owner_id": bob.owner_id})
    created = classes.create(alice.owner_id, forged).value

    stored = db.query(ClassSessionModel).filter(ClassSessionModel.record_id == created.id).one()
    assert stored.owner_id == alice.owner_id
    assert classes.list_owned(bob.owner_id) == Ok([])


def test_create_schema_has_no_owner_field():
    for schema in (ClassCreate, ExamCreate, NoteCreate):
        assert "owner_id" not in schema.model_fields


def test_create_rejects_unvalidated_payloads(classes, registered, db):
    alice = registered["alice"]
    for payload in (dict(MATH), NoteCreate(content="wrong kind")):
        with pytest.raises(TypeError):
            classes.create(alice.owner_id, payload)
    assert db.query(ClassSessionModel).count() == 0


def test_create_for_unknown_owner(classes):
    result = classes.create("missing", ClassCreate(**MATH))
    assert isinstance(result, Err) and result.kind is ErrorKind.NOT_FOUND


def test_records_are_partitioned_by_owner(classes, registered):
    alice, bob = registered["alice"], registered["bob"]
    classes.create(alice.owner_id, ClassCreate(**MATH))
    classes.create(bob.owner_id, ClassCreate(**{**MATH, "subject": "Art"}))
    assert [c.subject for c in classes.list_owned(alice.owner_id).value] == ["Math"]
    assert [c.subject for c in classes.list_owned(bob.owner_id).value] == ["Art"]


def test_list_public_by_code(classes, registered):
    alice = registered["alice"]
    created = classes.create(alice.owner_id, ClassCreate(**MATH)).value
    assert classes.list_public(alice.access_code) == Ok([created])
    assert "owner_id" not in created.model_dump()


@pytest.mark.parametrize("code", ["ZZZZ9", "", None, "nope"])
def test_list_public_unknown_code(classes, registered, code):
    classes.create(registered["alice"].owner_id, ClassCreate(**MATH))
    result = classes.list_public(code)
    assert isinstance(result, Err)
    assert result.kind is ErrorKind.NOT_FOUND


def test_delete_own_record(classes, registered):
    alice = registered["alice"]
    created = classes.create(alice.owner_id, ClassCreate(**MATH)).value
    assert classes.delete(alice.owner_id, created.id) == Ok(None)
    assert classes.list_owned(alice.owner_id) == Ok([])


def test_delete_foreign_or_missing_record_is_acknowledged_without_effect(classes, registered):
    alice, bob = registered["alice"], registered["bob"]
    created = classes.create(alice.owner_id, ClassCreate(**MATH)).value

    assert classes.delete(bob.owner_id, created.id) == Ok(None)
    assert classes.delete(alice.owner_id, "does-not-exist") == Ok(None)
    assert classes.list_owned(alice.owner_id) == Ok([created])


def test_exam_and_note_kinds(db, owners, registered):
    alice = registered["alice"]
    exams = RecordManager(db, EXAM_KIND, owners)
    notes = RecordManager(db, NOTE_KIND, owners)

    exam = exams.create(
        alice.owner_id,
        ExamCreate(subject="Physics", date=dt.date(2026, 5, 4), time_hour=9, time_minute=30),
    ).value
    note = notes.create(alice.owner_id, NoteCreate(content="Bring calculator")).value

    assert exam.date == "2026-05-04"
    assert exam.syllabus == ""
    assert notes.list_public(alice.access_code) == Ok([note])
    assert exams.list_public(alice.access_code) == Ok([exam])
    # Kinds do not leak into each other
    assert RecordManager(db, CLASS_KIND, owners).list_owned(alice.owner_id) == Ok([])


def test_storage_error_is_reported():
    broken = mock.MagicMock()
    broken.query.side_effect = OperationalError("SELECT", {}, Exception("gone"))
    classes = RecordManager(broken, CLASS_KIND)
    for result in (
        classes.list_owned("a"),
        classes.list_public("ABCDE"),
        classes.delete("a", "b"),
        classes.create("a", ClassCreate(**MATH)),
    ):
        assert isinstance(result, Err)
        assert result.kind is ErrorKind.STORAGE_FAILURE
