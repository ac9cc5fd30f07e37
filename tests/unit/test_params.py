"""Unit tests for placeholder normalization and parameter coercion."""

from __future__ import annotations

import datetime
from decimal import Decimal

import pytest

from lite_query.core.exceptions import ParameterBindingError
from lite_query.core.params import (
    SqlType,
    check_parameters,
    coerce_parameter,
    normalize_placeholders,
)


class TestNormalizePlaceholders:
    def test_qmark_passthrough(self) -> None:
        sql = "SELECT * FROM users WHERE id = ?"
        assert normalize_placeholders(sql, "qmark") == sql

    def test_format_conversion(self) -> None:
        sql = "SELECT * FROM users WHERE id = ? AND name = ?"
        expected = "SELECT * FROM users WHERE id = %s AND name = %s"
        assert normalize_placeholders(sql, "format") == expected

    def test_numeric_conversion(self) -> None:
        sql = "SELECT * FROM users WHERE id = ? AND name = ?"
        expected = "SELECT * FROM users WHERE id = :1 AND name = :2"
        assert normalize_placeholders(sql, "numeric") == expected

    def test_string_literal_exclusion(self) -> None:
        sql = "SELECT * FROM t WHERE col = 'why?' AND id = ?"
        expected = "SELECT * FROM t WHERE col = 'why?' AND id = :1"
        assert normalize_placeholders(sql, "numeric") == expected

    def test_percent_escaped_for_format(self) -> None:
        sql = "SELECT * FROM t WHERE name LIKE 'a%' AND id = ? AND pct % 2 = 0"
        expected = "SELECT * FROM t WHERE name LIKE 'a%%' AND id = %s AND pct %% 2 = 0"
        assert normalize_placeholders(sql, "format") == expected

    def test_numbering_continues_after_literal(self) -> None:
        sql = "SELECT ? || '?' || ?"
        assert normalize_placeholders(sql, "numeric") == "SELECT :1 || '?' || :2"

    def test_no_params(self) -> None:
        assert normalize_placeholders("SELECT 1", "format") == "SELECT 1"

    def test_unknown_style(self) -> None:
        with pytest.raises(ValueError):
            normalize_placeholders("SELECT ?", "named")


class TestCheckParameters:
    def test_equal_lengths_bind(self) -> None:
        assert check_parameters([1, "a"], [SqlType.INTEGER, SqlType.VARCHAR], "op") is True

    @pytest.mark.parametrize(
        ("parameters", "sql_types"),
        [(None, None), ([], []), ([1], None), (None, [SqlType.INTEGER]), ([1], [])],
    )
    def test_absent_or_empty_skips_binding(self, parameters, sql_types) -> None:
        assert check_parameters(parameters, sql_types, "op") is False

    def test_mismatched_lengths(self) -> None:
        with pytest.raises(ParameterBindingError) as exc_info:
            check_parameters([1, 2], [SqlType.INTEGER], "Session.find_list")
        assert exc_info.value.operation == "Session.find_list"
        assert "2 parameters but 1 sql types" in str(exc_info.value)


class TestCoerceParameter:
    @pytest.mark.parametrize(
        ("value", "sql_type", "expected"),
        [
            (5, SqlType.VARCHAR, "5"),
            ("12", SqlType.BIGINT, 12),
            ("1.5", SqlType.DOUBLE, 1.5),
            (1.1, SqlType.DECIMAL, Decimal("1.1")),
            (1, SqlType.BOOLEAN, True),
            ("2024-05-06", SqlType.DATE, datetime.date(2024, 5, 6)),
            ("2024-05-06T07:08:09", SqlType.TIMESTAMP, datetime.datetime(2024, 5, 6, 7, 8, 9)),
            ("07:08", SqlType.TIME, datetime.time(7, 8)),
            ("abc", SqlType.BLOB, b"abc"),
            ([1, 2], SqlType.OTHER, [1, 2]),
        ],
    )
    def test_conversions(self, value, sql_type, expected) -> None:
        assert coerce_parameter(value, sql_type) == expected

    @pytest.mark.parametrize("sql_type", list(SqlType))
    def test_none_stays_none(self, sql_type) -> None:
        assert coerce_parameter(None, sql_type) is None

    def test_null_tag_forces_null(self) -> None:
        assert coerce_parameter("anything", SqlType.NULL) is None

    def test_unconvertible_value(self) -> None:
        with pytest.raises(ParameterBindingError) as exc_info:
            coerce_parameter("abc", SqlType.INTEGER, "Statement.bind")
        assert exc_info.value.operation == "Statement.bind"
        assert isinstance(exc_info.value.cause, ValueError)

    def test_unknown_tag(self) -> None:
        with pytest.raises(ParameterBindingError):
            coerce_parameter(1, "integer")  # type: ignore[arg-type]
