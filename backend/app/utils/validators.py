# backend/app/utils/validators.py

import re
from datetime import date
from typing import Any, Optional, Tuple

from app.core.exceptions import ValidationError

_TIME_RE = re.compile(r"^([01][0-9]|2[0-3]):[0-5][0-9]$")
_DATE_RE = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")

TIME_OFF_TYPES = ("vacation", "dayOff", "sickLeave", "other")
TIME_OFF_STATUSES = ("pending", "approved", "rejected")


def is_valid_time(value: Any) -> bool:
    """
    "HH:MM" (24시간제, 00:00 ~ 23:59) 여부. 앞뒤 공백은 허용합니다.
    """
    if not value or not isinstance(value, str):
        return False
    return _TIME_RE.match(value.strip()) is not None


def is_valid_date(value: Any) -> bool:
    """
    "YYYY-MM-DD" 형식이면서 실제 존재하는 날짜인지 검사합니다.
    2023-02-30 같은 값을 3월로 넘기지 않고 그대로 거부합니다.
    """
    if not value or not isinstance(value, str):
        return False

    value = value.strip()
    if not _DATE_RE.match(value):
        return False

    year, month, day = (int(part) for part in value.split("-"))
    try:
        parsed = date(year, month, day)
    except ValueError:
        return False
    return (parsed.year, parsed.month, parsed.day) == (year, month, day)


def resolve_time_off_range(
    type_: Optional[str],
    start_date: Optional[str],
    end_date: Optional[str],
) -> Tuple[str, str]:
    """
    휴가 요청의 (start_date, end_date)를 검증하고 확정합니다.
    - dayOff: end_date는 항상 start_date와 동일
    - 그 외: end_date 필수, start_date <= end_date
    """
    if not type_ or not start_date:
        raise ValidationError("Type and start date are required")

    if type_ not in TIME_OFF_TYPES:
        raise ValidationError("Invalid time off type")

    if not is_valid_date(start_date):
        raise ValidationError("Invalid start date format. Use YYYY-MM-DD")
    start_date = start_date.strip()

    if type_ == "dayOff":
        return start_date, start_date

    if not end_date:
        raise ValidationError("End date is required for vacation")

    if not is_valid_date(end_date):
        raise ValidationError("Invalid end date format. Use YYYY-MM-DD")
    end_date = end_date.strip()

    # 같은 형식의 ISO 날짜 문자열은 사전순 비교 == 날짜 비교
    if start_date > end_date:
        raise ValidationError("End date must be after start date")

    return start_date, end_date
