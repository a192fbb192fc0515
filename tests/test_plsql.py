"""Tests for the PL/SQL line writers."""

import io

from upper_table.plsql import format_sql, put, put_line, raw, sql_escape


def test_sql_escape_doubles_quotes_only():
    assert sql_escape("it's") == "it''s"
    assert sql_escape("a & b \\ c") == "a & b \\ c"


def test_format_sql_escapes_format_and_args():
    assert format_sql("'%s' = %s", "o'brien", "x") == "''o''''brien'' = x"
    assert format_sql("100%") == "100%"


def test_writers():
    out = io.StringIO()
    raw(out, "BEGIN")
    put(out, "%s = (", "NAME")
    put_line(out, "don't")
    assert out.getvalue() == "BEGIN\ndbms_output.put('NAME = (');\ndbms_output.put_line('don''t');\n"
