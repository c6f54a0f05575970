class AttendanceError(Exception):
    """출석 서비스 공용 예외 (status_code는 HTTP 응답 코드로 그대로 사용)"""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AttendanceError):
    """필수값 누락/허용되지 않은 상태값"""

    status_code = 400


class ServerError(AttendanceError):
    """저장소 연결 불가 또는 내부 오류"""

    status_code = 500
