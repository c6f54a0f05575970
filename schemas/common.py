"""
schemas/common.py

- 프로젝트 전반에서 재사용할 공용 스키마
- Pydantic v2 기준
- 에러 응답 표준: ErrorResponse ({"message": "..."})
  middlewares/error_handler.py에서 이 스키마로 리턴하면 Swagger 문서화도 깔끔해짐
"""

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """전역 에러 핸들러에서 내려주는 표준 에러 응답"""
    message: str = Field(..., description="사람이 읽을 수 있는 에러 메시지")

    model_config = ConfigDict(extra="ignore")
