"""Tests for time/date validators and the time-off range rules."""
import pytest

from app.core.exceptions import ValidationError
from app.utils.validators import is_valid_date, is_valid_time, resolve_time_off_range


class TestIsValidTime:

    @pytest.mark.parametrize("value", ["00:00", "09:00", "17:30", "23:59", " 08:15 "])
    def test_valid(self, value):
        assert is_valid_time(value) is True

    @pytest.mark.parametrize("value", ["24:00", "9:00", "", "12:60", "12:00:00", "ab:cd", "1200", "12:5"])
    def test_invalid(self, value):
        assert is_valid_time(value) is False

    def test_non_string(self):
        assert is_valid_time(None) is False
        assert is_valid_time(900) is False


class TestIsValidDate:

    @pytest.mark.parametrize("value", ["2023-02-28", "2024-02-29", "1999-12-31", " 2024-05-01 "])
    def test_valid(self, value):
        assert is_valid_date(value) is True

    @pytest.mark.parametrize("value", [
        "2023-02-30",   # 3월로 넘기지 않고 거부
        "2023-02-29",   # 평년
        "2023-13-01",
        "2023-00-10",
        "2023-01-00",
        "0000-01-01",
        "2023-2-1",
        "2023/02/01",
        "2023-02-01T00:00",
        "",
    ])
    def test_invalid(self, value):
        assert is_valid_date(value) is False

    def test_non_string(self):
        assert is_valid_date(None) is False
        assert is_valid_date(20230201) is False


class TestResolveTimeOffRange:

    def test_day_off_forces_end_date(self):
        assert resolve_time_off_range("dayOff", "2024-05-01", None) == ("2024-05-01", "2024-05-01")
        assert resolve_time_off_range("dayOff", "2024-05-01", "2024-06-01") == ("2024-05-01", "2024-05-01")

    def test_vacation_range(self):
        assert resolve_time_off_range("vacation", "2024-05-01", "2024-05-05") == ("2024-05-01", "2024-05-05")

    def test_same_day_range_allowed(self):
        assert resolve_time_off_range("sickLeave", "2024-05-01", "2024-05-01") == ("2024-05-01", "2024-05-01")

    @pytest.mark.parametrize("type_, start, end, message", [
        (None, "2024-05-01", "2024-05-02", "Type and start date are required"),
        ("vacation", None, "2024-05-02", "Type and start date are required"),
        ("holiday", "2024-05-01", "2024-05-02", "Invalid time off type"),
        ("vacation", "2024-5-1", "2024-05-02", "Invalid start date format. Use YYYY-MM-DD"),
        ("other", "2024-05-01", None, "End date is required for vacation"),
        ("vacation", "2024-05-01", "2024-02-30", "Invalid end date format. Use YYYY-MM-DD"),
        ("vacation", "2024-05-10", "2024-05-05", "End date must be after start date"),
    ])
    def test_rejections(self, type_, start, end, message):
        with pytest.raises(ValidationError) as exc:
            resolve_time_off_range(type_, start, end)
        assert exc.value.message == message
        assert exc.value.status_code == 400
