"""Character-class rules.

Whole-string matches over letter ranges plus rule-specific extras. The
Latin rules cover ``a-z`` (any case) and the Latin-1 supplement letters;
``valid_name`` accepts any Unicode letter. The Persian and Pashto rules use
explicit Arabic-script letter sets including the zero-width joiners
(U+200B..U+200D) that appear inside Persian words.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from fieldcheck.models.results import FailureRecord
from fieldcheck.validation.rules.base import CheckRoutine, as_text, fail, is_blank

# À-Ö, Ø-ö, ø-ÿ (skips × and ÷)
_LATIN_SUPPLEMENT = "\u00c0-\u00d6\u00d8-\u00f6\u00f8-\u00ff"
_LATIN_LETTERS = f"a-z{_LATIN_SUPPLEMENT}"

_ZERO_WIDTH = "\u200b-\u200d"

# ا آ أ إ ب پ ت ث ج چ ح خ د ذ ر ز ژ س ش ص ض ط ظ ع غ ف ق ک ك گ ل م ن و ؤ ه ة ی ي ئ ء
_PERSIAN_LETTERS = (
    "\u0627\u0622\u0623\u0625\u0628\u067e\u062a\u062b\u062c\u0686\u062d\u062e"
    "\u062f\u0630\u0631\u0632\u0698\u0633\u0634\u0635\u0636\u0637\u0638\u0639"
    "\u063a\u0641\u0642\u06a9\u0643\u06af\u0644\u0645\u0646\u0648\u0624\u0647"
    "\u0629\u06cc\u064a\u0626\u0621"
)
# tashdid, fatha, kasra, damma, tanwin forms, sukun
_ARABIC_DIACRITICS = "\u064b-\u0652"
# ټ ځ څ ډ ړ ږ ښ ګ ڼ ې ۍ
_PASHTO_LETTERS = "\u067c\u0681\u0685\u0689\u0693\u0696\u069a\u06ab\u06bc\u06d0\u06cd"
# Extended Arabic-Indic (Persian) and Arabic-Indic digits
_PERSIAN_DIGITS = "\u06f0-\u06f9\u0660-\u0669"
# . / \ = - | { } [ ] ؛ : « » ؟ > < + ( ) * ، × ٪ ٫ ٬ !
_PERSIAN_PUNCTUATION = (
    r"./\\=\-|{}\[\]"
    "\u061b:\u00ab\u00bb\u061f><+()*\u060c\u00d7\u066a\u066b\u066c!"
)
# BOM, straight and typographic quotes, backtick, acute accent
_QUOTES = "\ufeff\"'`\u00b4\u2018\u2019\u201c\u201d"


def _whole(char_class: str, flags: re.RegexFlag = re.RegexFlag(0)) -> re.Pattern[str]:
    return re.compile(f"[{char_class}]+", flags)


_ALPHA = _whole(_LATIN_LETTERS, re.IGNORECASE)
_ALPHA_NUMERIC = _whole(f"{_LATIN_LETTERS}0-9", re.IGNORECASE)
_ALPHA_DASH = _whole(f"{_LATIN_LETTERS}_\\-", re.IGNORECASE)
_ALPHA_SPACE = _whole(f"{_LATIN_LETTERS}\\s", re.IGNORECASE)
_ALPHA_NUMERIC_SPACE = _whole(f"{_LATIN_LETTERS}0-9\\s", re.IGNORECASE)

_NAME = re.compile(r"(?:[^\W\d_]|[ '\-])+")

_PERSIAN_NAME = _whole(f"{_PERSIAN_LETTERS}{_ARABIC_DIACRITICS}{_ZERO_WIDTH} ")
_ENG_PER_PAS_NAME = _whole(
    f"A-Za-z{_LATIN_SUPPLEMENT}'\\-"
    f"{_PERSIAN_LETTERS}{_PASHTO_LETTERS}{_ARABIC_DIACRITICS}{_ZERO_WIDTH}\\s"
)
_PERSIAN_DIGIT = _whole(_PERSIAN_DIGITS)
_PERSIAN_TEXT = _whole(
    f"{_PERSIAN_LETTERS}{_ARABIC_DIACRITICS}{_PERSIAN_PUNCTUATION}"
    f"{_PERSIAN_DIGITS}{_ZERO_WIDTH}{_QUOTES}\\s"
)
_PASHTU_TEXT = _whole(
    f"{_PERSIAN_LETTERS}{_PASHTO_LETTERS}{_ARABIC_DIACRITICS}{_PERSIAN_PUNCTUATION}"
    f"{_PERSIAN_DIGITS}{_ZERO_WIDTH}{_QUOTES}\\s"
)


def _pattern_rule(rule: str, pattern: re.Pattern[str], doc: str) -> CheckRoutine:
    def check(
        field: str, record: Mapping[str, Any], param: str | None = None
    ) -> FailureRecord | None:
        if is_blank(record, field):
            return None
        value = record[field]
        text = as_text(value)
        if text is not None and pattern.fullmatch(text):
            return None
        return fail(field, value, rule, param)

    check.__name__ = f"check_{rule}"
    check.__doc__ = doc
    return check


check_alpha = _pattern_rule("alpha", _ALPHA, "Letters only.")
check_alpha_numeric = _pattern_rule("alpha_numeric", _ALPHA_NUMERIC, "Letters and digits.")
check_alpha_dash = _pattern_rule(
    "alpha_dash", _ALPHA_DASH, "Letters, dashes and underscores."
)
check_alpha_space = _pattern_rule("alpha_space", _ALPHA_SPACE, "Letters and whitespace.")
check_alpha_numeric_space = _pattern_rule(
    "alpha_numeric_space", _ALPHA_NUMERIC_SPACE, "Letters, digits and whitespace."
)
check_valid_name = _pattern_rule(
    "valid_name", _NAME, "A human name: any letters, spaces, apostrophes and dashes."
)
check_valid_persian_name = _pattern_rule(
    "valid_persian_name", _PERSIAN_NAME, "Persian letters and spaces."
)
check_valid_eng_per_pas_name = _pattern_rule(
    "valid_eng_per_pas_name",
    _ENG_PER_PAS_NAME,
    "English, Persian or Pashto letters with spaces, apostrophes and dashes.",
)
check_valid_persian_digit = _pattern_rule(
    "valid_persian_digit", _PERSIAN_DIGIT, "Persian or Arabic-Indic digits."
)
check_valid_persian_text = _pattern_rule(
    "valid_persian_text", _PERSIAN_TEXT, "Persian letters, digits and punctuation."
)
check_valid_pashtu_text = _pattern_rule(
    "valid_pashtu_text", _PASHTU_TEXT, "Pashto letters, digits and punctuation."
)


def check_street_address(
    field: str, record: Mapping[str, Any], param: str | None = None
) -> FailureRecord | None:
    """Loose street address check: at least one letter, one digit and one space."""
    if is_blank(record, field):
        return None
    value = record[field]
    text = as_text(value) or ""
    has_letter = re.search(r"[a-zA-Z]", text) is not None
    has_digit = re.search(r"[0-9]", text) is not None
    has_space = re.search(r"\s", text) is not None
    if has_letter and has_digit and has_space:
        return None
    return fail(field, value, "street_address", param)


def get_character_rules() -> dict[str, CheckRoutine]:
    """Return character-class rule routines keyed by rule name."""
    return {
        "alpha": check_alpha,
        "alpha_numeric": check_alpha_numeric,
        "alpha_dash": check_alpha_dash,
        "alpha_space": check_alpha_space,
        "alpha_numeric_space": check_alpha_numeric_space,
        "valid_name": check_valid_name,
        "street_address": check_street_address,
        "valid_persian_name": check_valid_persian_name,
        "valid_eng_per_pas_name": check_valid_eng_per_pas_name,
        "valid_persian_digit": check_valid_persian_digit,
        "valid_persian_text": check_valid_persian_text,
        "valid_pashtu_text": check_valid_pashtu_text,
    }
