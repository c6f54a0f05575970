from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class AttendanceStatus(str, Enum):
    PRESENT = "Present"
    ABSENT = "Absent"


# ✅ 생성 계약의 기본값 (폼 초기값과 서버가 같은 값을 바라보도록 한 곳에서 정의)
DEFAULT_STATUS = AttendanceStatus.PRESENT


# ✅ 출석 등록용 (POST 요청)
class AttendanceCreate(BaseModel):
    student_name: str = Field(..., alias="studentName", min_length=1)  # 학생 이름 (공백만 있으면 거부)
    status: AttendanceStatus                                            # 출석 상태

    # date, _id 등 클라이언트가 보낸 나머지 키는 무시
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True, extra="ignore")


# ✅ 출석 조회/응답용 (GET 응답, POST 응답)
class AttendanceRecord(BaseModel):
    id: str = Field(..., alias="_id")                 # 저장소가 부여한 고유 ID
    student_name: str = Field(..., alias="studentName")
    date: datetime                                    # 서버가 기록한 생성 시각
    status: AttendanceStatus

    model_config = ConfigDict(populate_by_name=True)
