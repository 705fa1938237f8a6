import logging

import pytest

from gravity.Point import Point
from gravity.Vec2 import Vec2
from gravity.records import RecordError, parse_record, parse_records


def test_parse_record():
    e = parse_record(["10", "1.5", "-2", "0", "3", "0.25", "0"])
    assert e.mass == 10
    assert e.position == Point(1.5, -2)
    assert e.velocity == Vec2(0, 3)
    assert e.acceleration == Vec2(0.25, 0)


def test_parse_record_accepts_numbers_and_whitespace():
    e = parse_record([1, 2.0, " 3 ", "4", "5", "6", "7"])
    assert e.to_record() == (1, 2, 3, 4, 5, 6, 7)


@pytest.mark.parametrize("row", [
    ["", "", "", "", "", "", ""],
    ["  ", None, "", "", "", "", ""],
    [],
])
def test_blank_record_is_skipped(row):
    assert parse_record(row) is None


@pytest.mark.parametrize("row, field", [
    (["heavy", "0", "0", "0", "0", "0", "0"], "mass"),
    (["1", "0", "y", "0", "0", "0", "0"], "y position"),
    (["1", "0", "0", "0", "0", "0", ""], "y acceleration"),
    (["1", "0", "0", "nan", "0", "0", "0"], "x velocity"),
    (["0", "0", "0", "0", "0", "0", "0"], "mass"),
    (["-5", "0", "0", "0", "0", "0", "0"], "mass"),
    (["1", "0", "0"], "record"),
])
def test_bad_record_names_the_field(row, field):
    with pytest.raises(RecordError) as excinfo:
        parse_record(row, rownum=4)
    assert excinfo.value.row == 4
    assert excinfo.value.field == field
    assert isinstance(excinfo.value, ValueError)


def test_bad_row_is_dropped_and_reported(caplog):
    rows = [
        ["1", "0", "0", "0", "0", "0", "0"],
        ["abc", "1", "1", "0", "0", "0", "0"],
    ]
    errors = []
    with caplog.at_level(logging.WARNING, logger="gravity.records"):
        entities = parse_records(rows, on_error=errors.append)
    assert len(entities) == 1
    assert entities[0].mass == 1
    assert [(e.row, e.field) for e in errors] == [(1, "mass")]
    assert "Could not parse mass in row 1" in caplog.text


def test_parse_records_skips_blank_rows_quietly(caplog):
    rows = [["", "", "", "", "", "", ""], ["2", "1", "1", "0", "0", "0", "0"], [""] * 7]
    with caplog.at_level(logging.WARNING, logger="gravity.records"):
        entities = parse_records(rows)
    assert len(entities) == 1
    assert caplog.records == []


def test_parse_records_empty_table():
    assert parse_records([]) == []
