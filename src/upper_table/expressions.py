"""Compiled-in tables of linguistic sort expressions and characters to probe.

Each expression is a PL/SQL upper-case expression that may return different
results than the application's locale-aware upper-casing for the given
language. The character list holds the code points known to be fussy.
"""

from upper_table.models import LocaleExpression

CHARS_TO_TEST = (
    # i may be messed up for Turkic languages where it's supposed to upper-case to dotted I.
    "i",
    # Sharp s may upper-case to SS or itself, depending on the details.
    "ß",
    # Oracle removes tonos from all of these when upper-casing.
    "Ά", "Έ", "Ή", "Ί", "Ό", "Ύ", "Ώ",
    "ά", "έ", "ή", "ί", "ό", "ύ", "ώ",
)

# Control entry: no exceptions are probed for it.
BASELINE = "ESPERANTO"

_TURKIC = "nls_upper(translate(%s,'i','İ'), 'nls_sort=xturkish')"

# (name, expression, language)
_EXPRESSION_ROWS = [
    ("ENGLISH", "upper(%s)", "en"),
    ("GERMAN", "nls_upper(%s, 'nls_sort=xgerman')", "de"),
    ("FRENCH", "nls_upper(%s, 'nls_sort=xfrench')", "fr"),
    ("ITALIAN", "nls_upper(%s, 'nls_sort=italian')", "it"),
    ("SPANISH", "nls_upper(%s, 'nls_sort=spanish')", "es"),
    ("CATALAN", "nls_upper(%s, 'nls_sort=catalan')", "ca"),
    ("DUTCH", "nls_upper(%s, 'nls_sort=dutch')", "nl"),
    ("PORTUGUESE", "nls_upper(%s, 'nls_sort=west_european')", "pt"),
    ("DANISH", "nls_upper(%s, 'nls_sort=danish')", "da"),
    ("NORWEGIAN", "nls_upper(%s, 'nls_sort=norwegian')", "no"),
    ("SWEDISH", "nls_upper(%s, 'nls_sort=swedish')", "sv"),
    ("FINNISH", "nls_upper(%s, 'nls_sort=finnish')", "fi"),
    ("CZECH", "nls_upper(%s, 'nls_sort=xczech')", "cs"),
    ("POLISH", "nls_upper(%s, 'nls_sort=polish')", "pl"),
    ("TURKISH", _TURKIC, "tr"),
    ("CHINESE_HK", "nls_upper(to_single_byte(%s), 'nls_sort=tchinese_radical_m')", "zh"),
    ("CHINESE_TW", "nls_upper(to_single_byte(%s), 'nls_sort=tchinese_radical_m')", "zh"),
    ("CHINESE", "nls_upper(to_single_byte(%s), 'nls_sort=schinese_radical_m')", "zh"),
    ("JAPANESE", "nls_upper(to_single_byte(%s), 'nls_sort=japanese_m')", "ja"),
    ("KOREAN", "nls_upper(to_single_byte(%s), 'nls_sort=korean_m')", "ko"),
    ("RUSSIAN", "nls_upper(%s, 'nls_sort=russian')", "ru"),
    ("BULGARIAN", "nls_upper(%s, 'nls_sort=bulgarian')", "bg"),
    ("INDONESIAN", "nls_upper(%s, 'nls_sort=indonesian')", "in"),
    ("ROMANIAN", "nls_upper(%s, 'nls_sort=romanian')", "ro"),
    ("VIETNAMESE", "nls_upper(%s, 'nls_sort=vietnamese')", "vi"),
    ("UKRANIAN", "nls_upper(%s, 'nls_sort=ukrainian')", "uk"),
    ("HUNGARIAN", "nls_upper(%s, 'nls_sort=xhungarian')", "hu"),
    ("GREEK", "nls_upper(%s, 'nls_sort=greek')", "el"),
    ("HEBREW", "nls_upper(%s, 'nls_sort=hebrew')", "iw"),
    ("SLOVAK", "nls_upper(%s, 'nls_sort=slovak')", "sk"),
    ("SERBIAN_CYRILLIC", "nls_upper(%s, 'nls_sort=generic_m')", "sr"),
    ("SERBIAN_LATIN", "nls_upper(%s, 'nls_sort=xcroatian')", "sh"),
    ("BOSNIAN", "nls_upper(%s, 'nls_sort=xcroatian')", "bs"),
    ("GEORGIAN", "nls_upper(%s, 'nls_sort=binary')", "ka"),
    ("BASQUE", "nls_upper(%s, 'nls_sort=west_european')", "eu"),
    ("MALTESE", "nls_upper(%s, 'nls_sort=west_european')", "mt"),
    ("ROMANSH", "nls_upper(%s, 'nls_sort=west_european')", "rm"),
    ("LUXEMBOURGISH", "nls_upper(%s, 'nls_sort=west_european')", "lb"),
    ("IRISH", "nls_upper(%s, 'nls_sort=west_european')", "ga"),
    ("SLOVENE", "nls_upper(%s, 'nls_sort=xslovenian')", "sl"),
    ("CROATIAN", "nls_upper(%s, 'nls_sort=xcroatian')", "hr"),
    ("MALAY", "nls_upper(%s, 'nls_sort=malay')", "ms"),
    ("ARABIC", "nls_upper(%s, 'nls_sort=arabic')", "ar"),
    ("ESTONIAN", "nls_upper(%s, 'nls_sort=estonian')", "et"),
    ("ICELANDIC", "nls_upper(%s, 'nls_sort=icelandic')", "is"),
    ("LATVIAN", "nls_upper(%s, 'nls_sort=latvian')", "lv"),
    ("LITHUANIAN", "nls_upper(%s, 'nls_sort=lithuanian')", "lt"),
    ("KYRGYZ", "nls_upper(%s, 'nls_sort=binary')", "ky"),
    ("KAZAKH", "nls_upper(%s, 'nls_sort=binary')", "kk"),
    ("TAJIK", "nls_upper(%s, 'nls_sort=russian')", "tg"),
    ("BELARUSIAN", "nls_upper(%s, 'nls_sort=russian')", "be"),
    ("TURKMEN", _TURKIC, "tk"),
    ("AZERBAIJANI", _TURKIC, "az"),
    ("ARMENIAN", "nls_upper(%s, 'nls_sort=binary')", "hy"),
    ("THAI", "nls_upper(%s, 'nls_sort=thai_dictionary')", "th"),
    ("HINDI", "nls_upper(%s, 'nls_sort=binary')", "hi"),
    ("URDU", "nls_upper(%s, 'nls_sort=arabic')", "ur"),
    ("BENGALI", "nls_upper(%s, 'nls_sort=bengali')", "bn"),
    ("TAMIL", "nls_upper(%s, 'nls_sort=binary')", "ta"),
    ("ESPERANTO", "upper(%s)", "eo"),
    # for formulas
    ("XWEST_EUROPEAN", "NLS_UPPER(%s,'NLS_SORT=xwest_european')", "en"),
]

UPPER_EXPRESSIONS = tuple(
    LocaleExpression(name=name, expression=expression, language=language)
    for name, expression, language in _EXPRESSION_ROWS
)


def by_name(name: str) -> LocaleExpression:
    """Return the compiled-in expression called ``name``.

    Raises
    ------
    KeyError
        If no expression has that name.
    """
    for expr in UPPER_EXPRESSIONS:
        if expr.name == name:
            return expr
    raise KeyError(f"Unknown linguistic sort: {name}")
