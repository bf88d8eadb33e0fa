"""쿼리 빌더 예외 정의"""

from typing import Any

from app.core.exceptions import BadRequestException, ErrorCode


class InvalidFilterValueException(BadRequestException):
    """필터 값을 해석할 수 없는 경우 (예: *Date 키의 잘못된 날짜)"""

    def __init__(self, field: str, value: Any, expected: str = "date"):
        super().__init__(
            message=f'필터 "{field}"의 값을 해석할 수 없습니다. ({expected})',
            error_code=ErrorCode.INVALID_FILTER_VALUE,
            detail={"field": field, "value": value, "expected": expected},
        )


class InvalidFilterFieldException(BadRequestException):
    """모델에 존재하지 않는 필드로 필터/정렬/검색하는 경우"""

    def __init__(self, model: str, field: str):
        super().__init__(
            message=f'"{model}" 모델에 "{field}" 필드가 없습니다.',
            error_code=ErrorCode.INVALID_FILTER_FIELD,
            detail={"model": model, "field": field},
        )


class InvalidSortOrderException(BadRequestException):
    """정렬 방향이 asc/desc 가 아닌 경우"""

    def __init__(self, sort_order: Any):
        super().__init__(
            message="정렬 방향은 asc 또는 desc 여야 합니다.",
            error_code=ErrorCode.INVALID_SORT_ORDER,
            detail={"sort_order": sort_order},
        )


class UnknownModelException(BadRequestException):
    """등록되지 않은 모델 이름"""

    def __init__(self, model: str):
        super().__init__(
            message=f'알 수 없는 모델입니다: "{model}"',
            error_code=ErrorCode.UNKNOWN_MODEL,
            detail={"model": model},
        )
