"""Built-in check routines.

Rules are organized by category:
- presence: required, required_file
- membership: contains, contains_list, doesnt_contain_list, boolean, starts
- limits: length, numeric range and array size rules
- characters: alpha family, names, street address, Persian and Pashto text
- format: numeric, integer, float, email, URL, IP, GUID, JSON, phone, regex, date, min_age
- checksum: valid_cc (Luhn), iban (mod-97)
- consistency: equalsfield
- files: extension
"""

from fieldcheck.validation.rules.base import CheckRoutine
from fieldcheck.validation.rules.characters import get_character_rules
from fieldcheck.validation.rules.checksum import get_checksum_rules
from fieldcheck.validation.rules.consistency import get_consistency_rules
from fieldcheck.validation.rules.files import get_file_rules
from fieldcheck.validation.rules.format import get_format_rules
from fieldcheck.validation.rules.limits import get_limit_rules
from fieldcheck.validation.rules.membership import get_membership_rules
from fieldcheck.validation.rules.presence import get_presence_rules


def get_builtin_rules() -> dict[str, CheckRoutine]:
    """Return every built-in routine keyed by rule name."""
    rules: dict[str, CheckRoutine] = {}
    for group in (
        get_presence_rules(),
        get_membership_rules(),
        get_limit_rules(),
        get_character_rules(),
        get_format_rules(),
        get_checksum_rules(),
        get_consistency_rules(),
        get_file_rules(),
    ):
        rules.update(group)
    return rules


__all__ = [
    "CheckRoutine",
    "get_builtin_rules",
]
