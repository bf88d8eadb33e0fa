"""요청 필드 분리 및 필터 프레디킷 생성

요청 매핑에는 스키마 정보가 없으므로, 필드 이름의 접미사로
필터 종류를 결정합니다. 규칙은 위에서부터 순서대로 평가합니다.

    None                      -> 제외
    list/tuple                -> InFilter
    "...Domain" + str         -> EndsWithFilter("@" + value), 키에서 Domain 제거
    "...Date"   + str         -> GteFilter(날짜)
    "...Name"   + str         -> ContainsFilter(대소문자 무시)
    그 외                      -> 정확 일치 (값 그대로)
"""

from typing import Any, Callable, Mapping, Optional

from app.core.query.exceptions import InvalidFilterValueException
from app.core.query.types import (
    RESERVED_KEYS,
    ContainsFilter,
    ControlFields,
    EndsWithFilter,
    FilterPredicate,
    GteFilter,
    InFilter,
)
from app.core.utils.datetime import parse_iso_date

DOMAIN_SUFFIX = "Domain"
DATE_SUFFIX = "Date"
NAME_SUFFIX = "Name"

Synthesized = Optional[tuple[str, FilterPredicate]]


def _domain_rule(key: str, value: Any) -> Synthesized:
    # 접미사만 있는 키("Domain")는 대상 필드가 없으므로 정확 일치로 처리
    if not (
        key.endswith(DOMAIN_SUFFIX)
        and len(key) > len(DOMAIN_SUFFIX)
        and isinstance(value, str)
    ):
        return None
    return key[: -len(DOMAIN_SUFFIX)], EndsWithFilter(ends_with=f"@{value}")


def _date_rule(key: str, value: Any) -> Synthesized:
    if not (key.endswith(DATE_SUFFIX) and isinstance(value, str)):
        return None
    parsed = parse_iso_date(value)
    if parsed is None:
        raise InvalidFilterValueException(field=key, value=value)
    return key, GteFilter(gte=parsed)


def _name_rule(key: str, value: Any) -> Synthesized:
    if not (key.endswith(NAME_SUFFIX) and isinstance(value, str)):
        return None
    return key, ContainsFilter(contains=value, case_sensitive=False)


# 접미사 규칙 (순서 중요)
SUFFIX_RULES: tuple[Callable[[str, Any], Synthesized], ...] = (
    _domain_rule,
    _date_rule,
    _name_rule,
)


def synthesize(key: str, value: Any) -> Synthesized:
    """단일 (key, value) 쌍을 필터 프레디킷으로 변환

    Args:
        key: 요청 필드 이름
        value: 요청 값

    Returns:
        (대상 필드, 프레디킷) 튜플, 제외 대상이면 None

    Raises:
        InvalidFilterValueException: *Date 키의 값이 ISO 날짜가 아닌 경우
    """
    if value is None:
        return None

    if isinstance(value, (list, tuple)):
        # 빈 목록은 아무 것도 매칭하지 않으므로 제외
        if not value:
            return None
        return key, InFilter(values=list(value))

    for rule in SUFFIX_RULES:
        result = rule(key, value)
        if result is not None:
            return result

    return key, value


def partition(raw: Mapping[str, Any]) -> tuple[ControlFields, dict[str, Any]]:
    """제어 필드와 필터 후보 분리

    page, limit, search, sortBy, sortOrder 를 제외한 모든 키는
    필터 후보가 됩니다. (화이트리스트 없음)
    """
    control = {k: v for k, v in raw.items() if k in RESERVED_KEYS}
    candidates = {k: v for k, v in raw.items() if k not in RESERVED_KEYS}
    return ControlFields.model_validate(control), candidates


def build_filters(candidates: Mapping[str, Any]) -> dict[str, Any]:
    """필터 후보 전체에 대해 프레디킷 생성 (제외 대상은 버림)"""
    filters: dict[str, Any] = {}
    for key, value in candidates.items():
        result = synthesize(key, value)
        if result is None:
            continue
        target, predicate = result
        filters[target] = predicate
    return filters
