from enum import Enum
from typing import Any, Dict, Optional

from fastapi import HTTPException, status


class ErrorCode(str, Enum):
    """전역 에러 코드"""

    # 공통 에러
    INTERNAL_ERROR = "INTERNAL_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    BAD_REQUEST = "BAD_REQUEST"

    # 쿼리 관련
    INVALID_FILTER_VALUE = "INVALID_FILTER_VALUE"
    INVALID_FILTER_FIELD = "INVALID_FILTER_FIELD"
    INVALID_SORT_ORDER = "INVALID_SORT_ORDER"
    UNKNOWN_MODEL = "UNKNOWN_MODEL"


class BaseAPIException(HTTPException):
    """기본 API 예외 클래스

    HTTP 계층이 그대로 응답으로 변환할 수 있도록 상태 코드와
    에러 코드를 함께 보관합니다.
    """

    def __init__(
        self,
        status_code: int,
        error_code: str,
        message: str,
        detail: Optional[Dict[str, Any]] = None,
    ):
        self.error_code = error_code
        self.message = message
        self.detail_info = detail or {}
        super().__init__(status_code=status_code, detail=message)


class BadRequestException(BaseAPIException):
    """400 Bad Request"""

    def __init__(
        self,
        message: str = "잘못된 요청입니다.",
        error_code: str = ErrorCode.BAD_REQUEST,
        detail: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            error_code=error_code,
            message=message,
            detail=detail,
        )


class NotFoundException(BaseAPIException):
    """404 Not Found"""

    def __init__(
        self,
        message: str = "리소스를 찾을 수 없습니다.",
        error_code: str = ErrorCode.NOT_FOUND,
        detail: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            error_code=error_code,
            message=message,
            detail=detail,
        )
