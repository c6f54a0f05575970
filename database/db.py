from sqlalchemy import create_engine               # SQLAlchemy 엔진 생성 도구
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import declarative_base, sessionmaker  # 모델 Base 클래스 / 세션 팩토리
from sqlalchemy.pool import StaticPool

# ✅ 모델 정의 시 상속할 Base 클래스 (Declarative 방식 사용)
Base = declarative_base()


def build_engine(url: str) -> Engine:
    """
    연결 문자열로 엔진 생성 (실제 연결은 첫 사용 시점에 열림)
    - sqlite는 스레드풀에서 공유되도록 check_same_thread 해제
    - 메모리 DB는 커넥션 하나를 계속 재사용해야 데이터가 유지됨
    """
    parsed = make_url(url)
    if parsed.get_backend_name() == "sqlite":
        kwargs = {"connect_args": {"check_same_thread": False}}
        if parsed.database in (None, "", ":memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(url, **kwargs)
    return create_engine(url, pool_pre_ping=True)


def build_session_factory(engine: Engine) -> sessionmaker:
    # ✅ 세션 팩토리: DB 연결에 사용할 세션 생성기 정의
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)
