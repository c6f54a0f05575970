import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from schemas.common import ErrorResponse
from services.exceptions import AttendanceError

logger = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(message=message).model_dump())


def _describe(exc: RequestValidationError) -> str:
    # 첫 번째 오류만 "필드: 메시지" 형태로 노출 (예: "status: Input should be 'Present' or 'Absent'")
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    loc = [str(p) for p in first.get("loc", ()) if p != "body"]
    field = ".".join(loc)
    return f"{field}: {first.get('msg')}" if field else str(first.get("msg"))


def add_error_handlers(app: FastAPI):
    @app.exception_handler(AttendanceError)
    async def attendance_error_handler(request: Request, exc: AttendanceError):
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} 처리 실패: {exc.message}")
        return _error(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return _error(400, _describe(exc))

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(f"{request.method} {request.url.path} 예상치 못한 오류")
        return _error(500, str(exc) or "Internal server error")
