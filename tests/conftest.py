import pytest
from fastapi.testclient import TestClient

from config.settings import Settings
from database.db import build_engine
from main import create_app
from services.attendance_store import AttendanceStore


@pytest.fixture
def store():
    s = AttendanceStore(build_engine("sqlite://"))
    s.init_schema()
    yield s
    s.close()


@pytest.fixture
def down_store(tmp_path):
    # 존재하지 않는 디렉터리 → 연결 시점마다 OperationalError
    s = AttendanceStore(build_engine(f"sqlite:///{tmp_path / 'missing' / 'attendance.db'}"))
    yield s
    s.close()


@pytest.fixture
def settings():
    return Settings(DATABASE_URL="sqlite://", LOG_LEVEL="DEBUG")


@pytest.fixture
def client(settings, store):
    with TestClient(create_app(settings, store)) as c:
        yield c


@pytest.fixture
def down_client(settings, down_store):
    with TestClient(create_app(settings, down_store)) as c:
        yield c
