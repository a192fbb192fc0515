"""Tests for the linguistic sort expression model and tables."""

import pytest
from pydantic import ValidationError

from upper_table.expressions import BASELINE, CHARS_TO_TEST, UPPER_EXPRESSIONS, by_name
from upper_table.models import LocaleExpression


def test_probe_sql():
    german = by_name("GERMAN")
    assert german.probe_sql("i") == "nls_upper(unistr('\\0069'), 'nls_sort=xgerman')"
    assert german.sql("name") == "nls_upper(name, 'nls_sort=xgerman')"
    assert german.expected_upper("ß") == "SS"


def test_expression_is_frozen():
    with pytest.raises(ValidationError):
        by_name("ENGLISH").language = "fr"


def test_expression_needs_one_placeholder():
    with pytest.raises(ValidationError, match="exactly one %s"):
        LocaleExpression(name="BAD", expression="upper(x)", language="en")
    with pytest.raises(ValidationError, match="exactly one %s"):
        LocaleExpression(name="BAD", expression="concat(%s, %s)", language="en")


def test_expression_rejects_python_literal_breakers():
    with pytest.raises(ValidationError, match="double quotes"):
        LocaleExpression(name="BAD", expression='upper(%s) || "x"', language="en")


def test_name_and_language_patterns():
    with pytest.raises(ValidationError):
        LocaleExpression(name="lower", expression="upper(%s)", language="en")
    with pytest.raises(ValidationError):
        LocaleExpression(name="OK", expression="upper(%s)", language="en_US")


def test_tables():
    assert len(UPPER_EXPRESSIONS) == 61
    assert len(CHARS_TO_TEST) == 16
    assert by_name(BASELINE).expression == "upper(%s)"
    assert len({e.name for e in UPPER_EXPRESSIONS}) == len(UPPER_EXPRESSIONS)


def test_by_name_unknown():
    with pytest.raises(KeyError, match="KLINGON"):
        by_name("KLINGON")
