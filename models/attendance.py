import uuid

from sqlalchemy import Column, DateTime, String, Text
from sqlalchemy.dialects import mysql

from database.db import Base


def _new_id() -> str:
    return uuid.uuid4().hex


class Attendance(Base):
    __tablename__ = "attendance"  # 출석 기록 컬렉션

    id = Column(String(32), primary_key=True, default=_new_id)  # 저장소가 부여하는 고유 ID (변경 불가)
    student_name = Column(Text, nullable=False)                 # 학생 이름 (길이 제한 없음)
    # 생성 시각 (서버가 UTC로 기록, MySQL도 마이크로초까지 보존)
    date = Column(DateTime().with_variant(mysql.DATETIME(fsp=6), "mysql"), nullable=False)
    status = Column(String(20), nullable=False)                 # 출석 상태 (Present / Absent)
