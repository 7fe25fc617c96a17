"""Rule declaration parsing and file loading.

Re-exports for convenient imports:
    from fieldcheck.parsing import parse_rules, parse_ruleset
    from fieldcheck.parsing import load_ruleset, load_records
"""

from fieldcheck.parsing.loader import frame_to_records, load_records, load_ruleset
from fieldcheck.parsing.rule_parser import parse_rule, parse_rules, parse_ruleset

__all__ = [
    "frame_to_records",
    "load_records",
    "load_ruleset",
    "parse_rule",
    "parse_rules",
    "parse_ruleset",
]
