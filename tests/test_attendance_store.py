from datetime import datetime, timedelta, timezone

import pytest

from schemas.attendance import AttendanceCreate, AttendanceStatus
from services.exceptions import ServerError, ValidationError


def test_insert_assigns_id_and_date(store):
    before = datetime.now(timezone.utc) - timedelta(seconds=1)
    rec = store.insert(AttendanceCreate(studentName="Alice", status="Present"))

    assert rec.id
    assert rec.student_name == "Alice"
    assert rec.status is AttendanceStatus.PRESENT
    assert rec.date.tzinfo is not None
    assert before <= rec.date <= datetime.now(timezone.utc) + timedelta(seconds=1)


def test_list_all_empty(store):
    assert store.list_all() == []


def test_list_all_returns_inserted(store):
    a = store.insert(AttendanceCreate(studentName="Alice", status="Present"))
    b = store.insert(AttendanceCreate(studentName="Bob", status="Absent"))
    assert {r.id for r in store.list_all()} == {a.id, b.id}


def test_insert_rejects_empty_name_without_request_validation(store):
    record = AttendanceCreate.model_construct(student_name="", status=AttendanceStatus.PRESENT)
    with pytest.raises(ValidationError):
        store.insert(record)
    assert store.list_all() == []


def test_insert_rejects_unknown_status_without_request_validation(store):
    record = AttendanceCreate.model_construct(student_name="Alice", status="Late")
    with pytest.raises(ValidationError) as exc:
        store.insert(record)
    assert "Present" in exc.value.message
    assert store.list_all() == []


def test_request_schema_ignores_extra_keys():
    record = AttendanceCreate.model_validate({"studentName": "Alice", "status": "Absent", "date": "2000-01-01"})
    assert record.model_dump() == {"student_name": "Alice", "status": AttendanceStatus.ABSENT}


def test_unreachable_store_raises_server_error(down_store):
    with pytest.raises(ServerError):
        down_store.init_schema()
    with pytest.raises(ServerError):
        down_store.list_all()
    with pytest.raises(ServerError):
        down_store.insert(AttendanceCreate(studentName="Alice", status="Present"))


def test_first_request_creates_collection_without_init(tmp_path):
    from database.db import build_engine
    from services.attendance_store import AttendanceStore

    s = AttendanceStore(build_engine(f"sqlite:///{tmp_path / 'attendance.db'}"))
    rec = s.insert(AttendanceCreate(studentName="Alice", status="Present"))
    assert [r.id for r in s.list_all()] == [rec.id]
    s.close()


def test_listed_date_matches_inserted_date(store):
    rec = store.insert(AttendanceCreate(studentName="Alice", status="Present"))
    assert store.list_all()[0].date == rec.date


def test_date_column_keeps_microseconds_on_mysql():
    from sqlalchemy.dialects import mysql as mysql_dialect
    from models.attendance import Attendance

    ddl = Attendance.__table__.c.date.type.compile(dialect=mysql_dialect.dialect())
    assert ddl == "DATETIME(6)"


def test_student_name_column_has_no_length_limit():
    from models.attendance import Attendance

    assert getattr(Attendance.__table__.c.student_name.type, "length", None) is None
