"""
services/attendance_client.py

- 출석 API를 호출하는 HTTP 클라이언트 + 화면 컴포넌트(폼/목록)의 상태 모델
- frontend/app.js 와 같은 동작을 파이썬으로 제공 (스크립트/테스트에서 사용)
- 요청 실패는 따로 처리하지 않음 → httpx.HTTPStatusError 그대로 전파
"""

from typing import List, Optional

import httpx

from schemas.attendance import DEFAULT_STATUS, AttendanceStatus

ATTENDANCE_PATH = "/api/attendance"


class AttendanceApiClient:
    def __init__(self, base_url: str = "http://localhost:5000", timeout: float = 10, http: Optional[httpx.Client] = None):
        # http를 넘기면 그대로 사용 (예: fastapi.testclient.TestClient)
        self.http = http or httpx.Client(base_url=base_url.rstrip("/"), timeout=timeout)

    def list_attendance(self) -> List[dict]:
        r = self.http.get(ATTENDANCE_PATH)
        r.raise_for_status()
        return r.json()

    def create_attendance(self, student_name: str, status: str) -> dict:
        r = self.http.post(ATTENDANCE_PATH, json={"studentName": student_name, "status": status})
        r.raise_for_status()
        return r.json()

    def close(self):
        self.http.close()


class AttendanceForm:
    """출석 등록 폼: 이름은 제출 성공 시 비우고, 상태는 유지"""

    def __init__(self, api: AttendanceApiClient):
        self.api = api
        self.student_name = ""
        self.status = DEFAULT_STATUS.value

    def set_student_name(self, value: str):
        self.student_name = value

    def set_status(self, value: str):
        self.status = AttendanceStatus(value).value

    def submit(self) -> dict:
        created = self.api.create_attendance(self.student_name, self.status)
        self.student_name = ""
        return created


class AttendanceList:
    """출석 목록: 첫 렌더링에서 한 번만 조회, 이후에는 새로고침 전까지 그대로"""

    def __init__(self, api: AttendanceApiClient):
        self.api = api
        self.records: List[dict] = []
        self._mounted = False

    def render(self) -> List[dict]:
        if not self._mounted:
            self._mounted = True
            self.records = self.api.list_attendance()
        return self.records
