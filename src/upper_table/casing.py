"""Locale-aware upper-casing as the application side sees it.

Python's ``str.upper`` already applies the full (unconditional) Unicode case
mappings, so ``"ß".upper() == "SS"``. The language-sensitive rules from
SpecialCasing.txt are layered on top here.
"""

import re

# Languages whose dotless/dotted i pair differs from the default mapping.
DOTTED_I_LANGUAGES = frozenset({"tr", "az"})

COMBINING_DOT_ABOVE = "\u0307"
LATIN_CAPITAL_I_WITH_DOT = "\u0130"

# Soft-dotted letters lose a following dot above when upper-cased in Lithuanian
_SOFT_DOTTED_DOT = re.compile(f"([ijįɨіј]){COMBINING_DOT_ABOVE}")


def locale_upper(value: str, language: str) -> str:
    """Upper-case ``value`` for ``language``.

    Parameters
    ----------
    value : str
        Text to upper-case.
    language : str
        ISO 639 language code, e.g. ``"tr"``.

    Returns
    -------
    str
        The upper-cased text. It may be longer than ``value``.
    """
    language = language.lower()
    if language in DOTTED_I_LANGUAGES:
        value = value.replace("i", LATIN_CAPITAL_I_WITH_DOT)
    elif language == "lt":
        value = _SOFT_DOTTED_DOT.sub(r"\1", value)
    return value.upper()


def hex_code_point(char: str) -> str:
    """Return four lower-case hex digits of the character's code point.

    Raises
    ------
    ValueError
        If ``char`` is not one character or lies outside the BMP, which
        a four digit ``unistr`` escape cannot express.
    """
    if len(char) != 1:
        raise ValueError(f"Expected a single character, got {char!r}")
    code_point = ord(char)
    if code_point > 0xFFFF:
        raise ValueError(f"Code point U+{code_point:X} is outside the Basic Multilingual Plane")
    return f"{code_point:04x}"
