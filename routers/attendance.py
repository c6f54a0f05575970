from typing import List

from fastapi import APIRouter, Depends, Request

from schemas.attendance import AttendanceCreate, AttendanceRecord
from schemas.common import ErrorResponse
from services.attendance_store import AttendanceStore

router = APIRouter(prefix="/attendance", tags=["attendance"])

# ==========================================================
# [공통] 저장소 주입 (main.create_app에서 app.state.store로 등록)
# ==========================================================
def get_store(request: Request) -> AttendanceStore:
    return request.app.state.store

# ==========================================================
# CRUD 라우터 (조회/등록만 제공)
# ==========================================================

# ✅ [READ] 전체 출석 기록 조회
@router.get(
    "",
    response_model=List[AttendanceRecord],
    responses={500: {"model": ErrorResponse}},
)
def read_attendance_list(store: AttendanceStore = Depends(get_store)):
    return store.list_all()

# ✅ [CREATE] 출석 기록 추가
@router.post(
    "",
    status_code=201,
    response_model=AttendanceRecord,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def create_attendance(attendance: AttendanceCreate, store: AttendanceStore = Depends(get_store)):
    return store.insert(attendance)
