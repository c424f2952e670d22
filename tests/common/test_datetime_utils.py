from datetime import date, datetime, timedelta, timezone

from src.church_cells.church_cells.common.datetime_utils import parse_report_date


def test_parse_naive_values_as_local():
    assert parse_report_date("2024-03-31T23:59:59") == datetime(2024, 3, 31, 23, 59, 59)
    assert parse_report_date("2024-01-05") == datetime(2024, 1, 5)
    assert parse_report_date(date(2024, 1, 5)) == datetime(2024, 1, 5)


def test_parse_aware_values_converts_to_local_naive():
    aware = datetime(2024, 6, 1, 12, 0, tzinfo=timezone(timedelta(hours=2)))

    parsed = parse_report_date(aware)

    assert parsed.tzinfo is None
    assert parsed == aware.astimezone().replace(tzinfo=None)


def test_parse_rejects_garbage():
    for value in (None, "", "   ", "yesterday", "2024-13-40", 1700000000, ["2024-01-01"]):
        assert parse_report_date(value) is None


def test_parse_out_of_range_offsets_gives_none():
    assert parse_report_date("0001-01-01T00:00:00+14:00") is None
    assert parse_report_date("9999-12-31T23:59:59-12:00") is None
