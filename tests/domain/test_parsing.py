"""Tests for unix, source-site, ISO and AccSaber date parsing."""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from rankclock.domain.parsing import (
    date_from_string,
    date_from_unix,
    ensure_utc,
    from_accsaber_date_string,
    is_valid_date,
    to_unix,
)
from rankclock.domain.zones import configure_timezones

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
MAY_FIRST_10 = datetime(2023, 5, 1, 10, 0, tzinfo=UTC)


class TestIsValidDate:
    def test_datetime(self) -> None:
        assert is_valid_date(MAY_FIRST_10)

    @pytest.mark.parametrize("value", [None, "2023-05-01", 1682935200, MAY_FIRST_10.date()])
    def test_non_datetimes(self, value: object) -> None:
        assert not is_valid_date(value)


class TestEnsureUtc:
    def test_naive_is_taken_as_utc(self) -> None:
        assert ensure_utc(datetime(2023, 5, 1, 10)) == MAY_FIRST_10

    def test_offset_is_converted(self) -> None:
        plus_two = timezone(timedelta(hours=2))
        result = ensure_utc(datetime(2023, 5, 1, 12, tzinfo=plus_two))
        assert result == MAY_FIRST_10
        assert result.tzinfo is UTC


class TestDateFromUnix:
    def test_zero_is_epoch(self) -> None:
        assert date_from_unix("0") == EPOCH

    def test_seconds_not_millis(self) -> None:
        assert date_from_unix("1682935200") == MAY_FIRST_10

    def test_nonsense_is_none(self) -> None:
        assert not is_valid_date(date_from_unix("nonsense"))

    def test_leading_digits_win(self) -> None:
        assert date_from_unix("  42abc") == EPOCH + timedelta(seconds=42)

    def test_negative(self) -> None:
        assert date_from_unix("-60") == EPOCH - timedelta(minutes=1)

    def test_int_and_float(self) -> None:
        assert date_from_unix(1682935200) == MAY_FIRST_10
        assert date_from_unix(1.9) == EPOCH + timedelta(seconds=1)

    @pytest.mark.parametrize("value", [True, float("nan"), float("inf"), "", None])
    def test_unusable_values(self, value: object) -> None:
        assert date_from_unix(value) is None

    def test_out_of_range(self) -> None:
        assert date_from_unix(10**20) is None

    def test_result_is_utc(self) -> None:
        result = date_from_unix("1682935200")
        assert result is not None
        assert result.tzinfo is UTC


class TestToUnix:
    def test_inverse_of_date_from_unix(self) -> None:
        assert to_unix(MAY_FIRST_10) == 1682935200

    def test_drops_fraction(self) -> None:
        assert to_unix(MAY_FIRST_10 + timedelta(milliseconds=999)) == 1682935200


class TestDateFromString:
    def test_source_site_format(self) -> None:
        assert date_from_string("2023-5-1 10:00 UTC") == MAY_FIRST_10

    def test_source_site_format_with_seconds(self) -> None:
        assert date_from_string("2023-05-01 10:00:30 UTC") == MAY_FIRST_10 + timedelta(seconds=30)

    def test_source_site_format_single_digit_time(self) -> None:
        assert date_from_string("2023-5-1 9:5 UTC") == datetime(2023, 5, 1, 9, 5, tzinfo=UTC)

    def test_source_site_format_invalid_month(self) -> None:
        assert date_from_string("2023-13-01 10:00 UTC") is None

    def test_iso_zulu(self) -> None:
        assert date_from_string("2023-05-01T10:00:00Z") == MAY_FIRST_10

    def test_iso_with_offset(self) -> None:
        assert date_from_string("2023-05-01T12:00:00+02:00") == MAY_FIRST_10

    def test_iso_without_offset_is_utc(self) -> None:
        assert date_from_string("2023-05-01T10:00:00") == MAY_FIRST_10

    def test_free_form(self) -> None:
        assert date_from_string("May 1, 2023 10:00") == MAY_FIRST_10

    def test_time_only_uses_library_clock_day(self, frozen_now: datetime) -> None:
        assert date_from_string("10:00") == datetime(2024, 1, 3, 10, 0, tzinfo=UTC)

    def test_missing_year_uses_library_clock_year(self, frozen_now: datetime) -> None:
        assert date_from_string("May 1 10:00") == datetime(2024, 5, 1, 10, 0, tzinfo=UTC)

    @pytest.mark.parametrize("value", [None, "", 1682935200, MAY_FIRST_10])
    def test_non_strings_and_empty(self, value: object) -> None:
        assert date_from_string(value) is None

    def test_garbage(self) -> None:
        assert date_from_string("definitely not a date") is None


class TestFromAccSaberDateString:
    def test_summer_time(self) -> None:
        # CEST, UTC+2
        assert from_accsaber_date_string("2023-07-01 12:00:00") == datetime(2023, 7, 1, 10, tzinfo=UTC)

    def test_winter_time(self) -> None:
        # CET, UTC+1
        assert from_accsaber_date_string("2023-01-15 12:00:00") == datetime(2023, 1, 15, 11, tzinfo=UTC)

    def test_date_only_is_local_midnight(self) -> None:
        assert from_accsaber_date_string("2023-07-01") == datetime(2023, 6, 30, 22, tzinfo=UTC)

    def test_fractional_seconds(self) -> None:
        result = from_accsaber_date_string("2023-01-15 12:00:00.250")
        assert result == datetime(2023, 1, 15, 11, 0, 0, 250000, tzinfo=UTC)

    def test_follows_configured_zone(self) -> None:
        configure_timezones(accsaber="UTC")
        assert from_accsaber_date_string("2023-01-15 12:00:00") == datetime(2023, 1, 15, 12, tzinfo=UTC)

    @pytest.mark.parametrize("value", ["garbage", "2023-02-30 00:00:00", "2023-5-1 10:00", None])
    def test_invalid(self, value: object) -> None:
        assert from_accsaber_date_string(value) is None  # type: ignore[arg-type]
