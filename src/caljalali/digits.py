from __future__ import annotations

PERSIAN_DIGITS = "۰۱۲۳۴۵۶۷۸۹"
ARABIC_INDIC_DIGITS = "٠١٢٣٤٥٦٧٨٩"
THOUSANDS_SEPARATOR = "٬"
DECIMAL_SEPARATOR = "٫"

_TO_FARSI = str.maketrans({
    **{str(i): PERSIAN_DIGITS[i] for i in range(10)},
    ",": THOUSANDS_SEPARATOR,
    ".": DECIMAL_SEPARATOR,
})

_TO_ENGLISH = str.maketrans({
    **{PERSIAN_DIGITS[i]: str(i) for i in range(10)},
    **{ARABIC_INDIC_DIGITS[i]: str(i) for i in range(10)},
})


def to_farsi(text: object) -> str:
    """Write ASCII digits, ',' and '.' with their Persian forms."""
    return str(text).translate(_TO_FARSI)

def to_english(text: str) -> str:
    """Replace Persian and Arabic-Indic digits with ASCII digits; separators are kept."""
    return text.translate(_TO_ENGLISH)
