"""Helpers that write SQL*Plus / PL/SQL lines to a text sink.

Every helper writes exactly one line. Text that ends up inside a
single-quoted literal is escaped with :func:`sql_escape` first; the script
runs with ``set define off`` so ampersands need no treatment.
"""

from typing import TextIO


def sql_escape(text: str) -> str:
    """Escape single quotes by doubling them up."""
    return text.replace("'", "''")


def format_sql(text: str, *args: str) -> str:
    """Escape ``text`` and ``args``, then substitute ``args`` into ``text``."""
    text = sql_escape(text)
    if args:
        text = text % tuple(sql_escape(arg) for arg in args)
    return text


def raw(out: TextIO, line: str) -> None:
    """Write a script line as is."""
    out.write(line + "\n")


def put(out: TextIO, text: str, *args: str) -> None:
    """Write a ``dbms_output.put`` call printing the formatted text."""
    raw(out, f"dbms_output.put('{format_sql(text, *args)}');")


def put_line(out: TextIO, text: str, *args: str) -> None:
    """Write a ``dbms_output.put_line`` call printing the formatted text."""
    raw(out, f"dbms_output.put_line('{format_sql(text, *args)}');")
