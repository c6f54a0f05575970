"""
services/attendance_store.py

- 출석 기록 저장소 (Record Store)
- 지원 연산: insert(추가), list_all(전체 조회) 두 가지뿐 (수정/삭제 없음)
- 엔진은 생성자로 주입받음 → 테스트/프로세스마다 독립된 저장소 구성 가능
- SQLAlchemy 오류는 롤백 후 ServerError로 감싸서 올림 (재시도 없음)
"""

import logging
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Iterator, List

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from database.db import Base, build_session_factory
from models.attendance import Attendance as AttendanceModel
from schemas.attendance import AttendanceCreate, AttendanceRecord, AttendanceStatus
from services.exceptions import ServerError, ValidationError

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    # DateTime 컬럼은 naive로 저장 → UTC 기준 naive 값으로 통일
    return datetime.now(timezone.utc).replace(tzinfo=None)


def _to_record(row: AttendanceModel) -> AttendanceRecord:
    created = row.date
    if created.tzinfo is None:
        created = created.replace(tzinfo=timezone.utc)
    return AttendanceRecord(
        id=row.id,
        student_name=row.student_name,
        date=created,
        status=AttendanceStatus(row.status),
    )


def _validate(record: AttendanceCreate) -> AttendanceStatus:
    name = record.student_name
    if not isinstance(name, str) or not name.strip():
        raise ValidationError("studentName is required")
    try:
        return AttendanceStatus(record.status)
    except ValueError:
        allowed = ", ".join(s.value for s in AttendanceStatus)
        raise ValidationError(f"status must be one of: {allowed}")


class AttendanceStore:
    def __init__(self, engine: Engine):
        self.engine = engine
        self._session_factory = build_session_factory(engine)
        self._schema_ready = False

    @contextmanager
    def _session(self, action: str) -> Iterator[Session]:
        session = self._session_factory()
        try:
            self._ensure_schema()
            yield session
        except SQLAlchemyError as e:
            session.rollback()
            logger.error(f"출석 저장소 {action} 실패: {e}")
            raise ServerError(f"Attendance store unavailable: {action} failed") from e
        finally:
            session.close()

    # ==========================================================
    # [초기화] 컬렉션(테이블) 생성
    # - 시작 시점에 저장소가 내려가 있어도, 첫 성공 요청에서 생성됨
    # ==========================================================
    def _ensure_schema(self) -> None:
        if not self._schema_ready:
            Base.metadata.create_all(bind=self.engine)
            self._schema_ready = True
            logger.info("출석 컬렉션 준비 완료")

    def init_schema(self) -> None:
        try:
            self._ensure_schema()
        except SQLAlchemyError as e:
            raise ServerError(f"Attendance store unavailable: {e.__class__.__name__}") from e

    # ✅ [CREATE] 출석 기록 추가
    def insert(self, record: AttendanceCreate) -> AttendanceRecord:
        status = _validate(record)
        with self._session("insert") as db:
            row = AttendanceModel(
                student_name=record.student_name.strip(),
                date=_utcnow(),
                status=status.value,
            )
            db.add(row)
            db.commit()
            logger.debug(f"출석 기록 추가: id={row.id}")
            return _to_record(row)

    # ✅ [READ] 전체 출석 기록 조회 (저장소 기본 순서, 필터/페이징 없음)
    def list_all(self) -> List[AttendanceRecord]:
        with self._session("list") as db:
            rows = db.query(AttendanceModel).all()
            return [_to_record(r) for r in rows]

    def close(self) -> None:
        self.engine.dispose()
