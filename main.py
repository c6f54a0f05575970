import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config.settings import Settings, get_settings
from database.db import build_engine
from services.attendance_store import AttendanceStore
from services.exceptions import ServerError

# ✅ 미들웨어 임포트
from middlewares.timing import TimingMiddleware
from middlewares.error_handler import add_error_handlers

# ✅ 라우터 임포트
from routers import attendance

logger = logging.getLogger(__name__)


def configure_logging(level: str):
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s [%(name)s] %(message)s")
    # HTTP 라이브러리 디버그 로그 비활성화
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


def create_app(settings: Optional[Settings] = None, store: Optional[AttendanceStore] = None) -> FastAPI:
    settings = settings or get_settings()
    if store is None:
        store = AttendanceStore(build_engine(settings.DATABASE_URL))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # 저장소 연결 실패해도 서버는 계속 실행 (요청 시점에 500으로 응답)
        try:
            store.init_schema()
            logger.info("출석 저장소 연결 완료")
        except ServerError as e:
            logger.error(f"출석 저장소 연결 실패: {e.message}")
        yield
        store.close()

    app = FastAPI(
        title=settings.APP_TITLE,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
        lifespan=lifespan,
    )
    app.state.store = store

    # ✅ CORS 설정 (프론트엔드 :3000 연동)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ✅ 요청 지연 측정 미들웨어 (응답 헤더 X-Latency-Ms 추가)
    app.add_middleware(TimingMiddleware)

    # ✅ 전역 에러 핸들러 등록 (일관된 {"message": ...} 포맷)
    add_error_handlers(app)

    # ✅ /api 프리픽스 라우터 등록
    app.include_router(attendance.router, prefix="/api")

    # ✅ 헬스체크 엔드포인트 (저장소 상태와 무관한 프로세스 생존 확인)
    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    return app


settings = get_settings()
configure_logging(settings.LOG_LEVEL)
app = create_app(settings)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=settings.PORT)
