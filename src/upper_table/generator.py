"""Generate the PL/SQL script that prints the ``OracleUpperTable`` module.

Run the output in Oracle (SQL*Plus) to produce the Python source of an
``OracleUpperTable`` enum. One member is created per
:class:`~upper_table.models.LocaleExpression`. Each member is built by
comparing :func:`~upper_table.casing.locale_upper` against the member's PL/SQL
expression for every character in a given set known to be fussy. Oracle is
the oracle here: the script only carries the comparisons, the divergences
are decided when it runs.

Usage:
    upper-table -o oracle_upper_table.sql
    sqlplus -s user/pass @oracle_upper_table.sql > oracle_upper_table.py
"""

from __future__ import annotations

import datetime
from collections.abc import Iterable
from typing import TextIO

from upper_table.casing import hex_code_point
from upper_table.expressions import BASELINE, CHARS_TO_TEST, UPPER_EXPRESSIONS
from upper_table.models import LocaleExpression
from upper_table.plsql import put, put_line, raw, sql_escape

# SQL*Plus wraps server output at LINESIZE; printed lines must stay below it
LINESIZE = 32767

SETUP_DIRECTIVES = (
    "set serveroutput on size unlimited format wrapped;",
    "set define off;",
    f"set linesize {LINESIZE};",
    "set trimout on;",
    "set feedback off;",
    "set verify off;",
    "set heading off;",
)

# ---------------------------------------------------------------------------
# Fixed parts of the generated module
# ---------------------------------------------------------------------------
MODULE_DESCRIPTION = """\
Each member of OracleUpperTable codifies the difference between executing a
particular PL/SQL expression in Oracle and calling locale_upper for a
particular language. These differences (also called exceptions) are exposed by
get_upper_case_exceptions() and get_upper_case_exception_mapping().

The tables are generated by testing a particular set of characters that are
known to contain exceptions. to_upper_case() compensates for the exceptions
found and returns output consistent with Oracle for the given (sql
expression, language) pair over all tested values.
"""

MEMBER_INIT = '''
    def __new__(cls, sql: str, language: str, exception_chars: str):
        obj = object.__new__(cls)
        # Ordinal value, rows may repeat (CHINESE_HK and CHINESE_TW)
        obj._value_ = len(cls.__members__)
        obj._sql = sql
        obj._language = language
        obj._exception_chars = exception_chars
        return obj

    def get_upper_case_exceptions(self) -> str:
        """Characters for which locale_upper deviates from Oracle evaluating this expression."""
        return self._exception_chars

    def get_upper_case_exception_mapping(self, exception: str) -> str:
        """Return what Oracle yields when upper-casing an exception character.

        Raises ValueError if ``exception`` is not one of
        get_upper_case_exceptions().
        """'''

ACCESSORS = '''\
        raise ValueError(
            f"No upper case mapping for char={exception!r} and this={self.name}"
        )

    @property
    def locale(self) -> str:
        return self._language

    def get_sql_format_string(self) -> str:
        return self._sql

    def get_sql(self, expr: str) -> str:
        return self._sql % expr

    def to_upper_case(self, value: str) -> str:
        """Upper-case ``value`` the way Oracle evaluates this expression."""
        exceptions = self._exception_chars
        result = []
        start = 0
        for i, c in enumerate(value):
            if c in exceptions:
                result.append(locale_upper(value[start:i], self._language))
                result.append(self.get_upper_case_exception_mapping(c))
                start = i + 1
        result.append(locale_upper(value[start:], self._language))
        return "".join(result)

    @classmethod
    def for_linguistic_sort(cls, sort: str) -> "OracleUpperTable":
        return cls[sort]'''


def _check(expressions: tuple[LocaleExpression, ...], chars: tuple[str, ...], baseline: str) -> None:
    """Reject inputs that would produce an invalid script or module."""
    names = [expr.name for expr in expressions]
    if len(set(names)) != len(names):
        raise ValueError(f"Duplicate expression names: {names}")
    if baseline not in names:
        raise ValueError(f"Baseline {baseline} is not one of the expressions")
    if not chars:
        raise ValueError("No characters to test")
    if len(set(chars)) != len(chars):
        raise ValueError(f"Duplicate characters to test: {chars}")
    for char in chars:
        hex_code_point(char)
        if char in "\"\\" or not char.isprintable():
            raise ValueError(f"Character {char!r} cannot be embedded in a Python string literal")


def _put_block(out: TextIO, block: str) -> None:
    for line in block.splitlines():
        put_line(out, line)


def _emit_header(out: TextIO, chars: tuple[str, ...], year: int) -> None:
    put_line(out, '"""AUTO GENERATED! DO NOT EDIT MANUALLY!')
    put_line(out, "")
    put_line(out, "Generated by %s, %s.", __name__, str(year))
    put_line(out, "")
    _put_block(out, MODULE_DESCRIPTION)
    put_line(out, "")
    put_line(out, "Characters tested:")
    put_line(out, "")
    for char in chars:
        put_line(out, "- U+%s", hex_code_point(char))
    put_line(out, '"""')
    put_line(out, "")
    put_line(out, "from enum import Enum")
    put_line(out, "")
    put_line(out, "from upper_table.casing import locale_upper")
    put_line(out, "")
    put_line(out, "")
    put_line(out, "class OracleUpperTable(Enum):")


def _emit_members(
    out: TextIO, expressions: tuple[LocaleExpression, ...], chars: tuple[str, ...], baseline: str
) -> None:
    """First pass: one member per expression, exception characters probed in Oracle."""
    for expr in expressions:
        put(out, '    %s = ("%s", "%s", "', expr.name, expr.expression, expr.language)
        # Don't generate any exceptions for the baseline, it's the control value.
        if expr.name != baseline:
            for char in chars:
                raw(
                    out,
                    f"IF {expr.probe_sql(char)} <> '{sql_escape(expr.expected_upper(char))}' "
                    f"THEN dbms_output.put(unistr('\\{hex_code_point(char)}')); END IF;",
                )
        put_line(out, '")')


def _emit_mappings(
    out: TextIO, expressions: tuple[LocaleExpression, ...], chars: tuple[str, ...], baseline: str
) -> None:
    """Second pass: per character, the Oracle result keyed by member name."""
    put_line(out, "        match exception:")
    for char in chars:
        put_line(out, '            case "%s":', char)
        put_line(out, "                match self.name:")
        for expr in expressions:
            if expr.name == baseline:
                continue
            probe = expr.probe_sql(char)
            expected = sql_escape(expr.expected_upper(char))
            raw(
                out,
                f"IF {probe} <> '{expected}' THEN dbms_output.put_line("
                f"'                    case \"{expr.name}\": return \"' || {probe} || '\"  # {expected}'"
                "); END IF;",
            )
        put_line(out, "                    case _:")
        put_line(out, "                        pass")


def generate(
    out: TextIO,
    expressions: Iterable[LocaleExpression] = UPPER_EXPRESSIONS,
    chars: Iterable[str] = CHARS_TO_TEST,
    baseline: str = BASELINE,
    year: int | None = None,
) -> None:
    """Write the upper-case exception probe script to ``out``.

    Parameters
    ----------
    out : TextIO
        Text sink; the caller owns and closes it.
    expressions : Iterable[LocaleExpression]
        Linguistic sorts to tabulate, in enum order.
    chars : Iterable[str]
        Characters to probe, one code point each.
    baseline : str
        Name of the control expression that gets no exceptions.
    year : int | None
        Year for the generated header, defaults to the current year.

    Raises
    ------
    ValueError
        If names or characters repeat, the baseline is unknown, or a
        character cannot be written as a four digit ``unistr`` escape
        or inside a Python string literal.
        Nothing is written in that case.
    """
    expressions = tuple(expressions)
    chars = tuple(chars)
    _check(expressions, chars, baseline)
    if year is None:
        year = datetime.date.today().year

    for directive in SETUP_DIRECTIVES:
        raw(out, directive)
    raw(out, "BEGIN")

    _emit_header(out, chars, year)
    _emit_members(out, expressions, chars, baseline)
    _put_block(out, MEMBER_INIT)
    _emit_mappings(out, expressions, chars, baseline)
    _put_block(out, ACCESSORS)

    raw(out, "END;")
    raw(out, "/")
    raw(out, "exit")
