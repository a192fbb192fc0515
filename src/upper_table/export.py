"""Export the compiled-in expression table to an Excel workbook for review."""

from pathlib import Path

from openpyxl import Workbook
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter

from upper_table.casing import hex_code_point, locale_upper
from upper_table.expressions import BASELINE, CHARS_TO_TEST, UPPER_EXPRESSIONS
from upper_table.models import LocaleExpression

HEADER_FONT = Font(name="Calibri", bold=True, size=11, color="FFFFFF")
HEADER_FILL = PatternFill(start_color="2F5496", end_color="2F5496", fill_type="solid")
HEADER_ALIGN = Alignment(horizontal="center", vertical="center", wrap_text=True)
CELL_ALIGN = Alignment(vertical="top", wrap_text=True)

EXPRESSION_HEADERS = ["Name", "Language", "Expression", "Probe SQL", "Baseline"]


def _write_header(ws, headers: list[str], widths: list[int]) -> None:
    for col_idx, header in enumerate(headers, 1):
        cell = ws.cell(row=1, column=col_idx, value=header)
        cell.font = HEADER_FONT
        cell.fill = HEADER_FILL
        cell.alignment = HEADER_ALIGN
    for i, w in enumerate(widths, 1):
        ws.column_dimensions[get_column_letter(i)].width = w
    # Freeze header row
    ws.freeze_panes = "A2"


def write_expression_sheet(
    ws, expressions: tuple[LocaleExpression, ...], chars: tuple[str, ...], baseline: str
) -> None:
    """Write one row per expression, with the probe SQL for the first character."""
    _write_header(ws, EXPRESSION_HEADERS, [20, 10, 60, 70, 10])
    for row_idx, expr in enumerate(expressions, 2):
        values = [
            expr.name,
            expr.language,
            expr.expression,
            expr.probe_sql(chars[0]),
            "yes" if expr.name == baseline else "",
        ]
        for col_idx, value in enumerate(values, 1):
            ws.cell(row=row_idx, column=col_idx, value=value).alignment = CELL_ALIGN


def write_character_sheet(ws, expressions: tuple[LocaleExpression, ...], chars: tuple[str, ...]) -> None:
    """Write one row per character with its expected upper case per language."""
    languages = sorted({expr.language for expr in expressions})
    _write_header(ws, ["Code Point", "Character", *languages], [12, 10] + [8] * len(languages))
    for row_idx, char in enumerate(chars, 2):
        ws.cell(row=row_idx, column=1, value=f"U+{hex_code_point(char)}").alignment = CELL_ALIGN
        ws.cell(row=row_idx, column=2, value=char).alignment = CELL_ALIGN
        for col_idx, language in enumerate(languages, 3):
            ws.cell(row=row_idx, column=col_idx, value=locale_upper(char, language)).alignment = CELL_ALIGN


def build_workbook(
    expressions=UPPER_EXPRESSIONS, chars=CHARS_TO_TEST, baseline: str = BASELINE
) -> Workbook:
    """Build a workbook with an Expressions sheet and a Characters sheet."""
    expressions = tuple(expressions)
    chars = tuple(chars)
    if not chars:
        raise ValueError("No characters to test")

    wb = Workbook()
    # Remove default sheet
    wb.remove(wb.active)
    write_expression_sheet(wb.create_sheet(title="Expressions"), expressions, chars, baseline)
    write_character_sheet(wb.create_sheet(title="Characters"), expressions, chars)
    return wb


def save_workbook(path: str | Path, **kwargs) -> Path:
    """Build the workbook and save it to ``path``, creating parent directories.

    Parameters
    ----------
    path : str | Path
        Destination .xlsx file.
    **kwargs
        Passed on to :func:`build_workbook`.

    Returns
    -------
    Path
        The path written.
    """
    path = Path(path)
    if path.suffix.lower() != ".xlsx":
        raise ValueError(f"Unsupported file extension: {path.suffix}")
    wb = build_workbook(**kwargs)
    path.parent.mkdir(parents=True, exist_ok=True)
    wb.save(path)
    return path
