"""
NamingService - renders campaign / ad group / ad / keyword text from patterns

Patterns contain ``{variable}`` tokens that are filled from a data row:

- Campaign: "Performance - {brand}"      -> "Performance - Nike"
- AdGroup:  "{category}"                 -> "Shoes"
- Keyword:  "buy {brand} {category}"     -> "buy Nike Shoes"
- Ad:       "{product} - only ${price}"  -> "Air Max - only $99.99"

Substitution rules:
- value present        -> its display string (numbers as plain decimals)
- value present but null -> "" (empty string)
- key absent from row  -> the literal token is kept, e.g. "{missing}"

Lookups are case-sensitive and substituted text is never re-scanned.
"""

import math
import re
from decimal import Decimal
from typing import Any, List, Mapping, Optional

VARIABLE_PATTERN = re.compile(r"\{([A-Za-z0-9_]+)\}")


def _format_float(value: float) -> str:
    """Number text as the wizard renders it: plain decimals, exponent form below 1e-6 and from 1e21"""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))

    text = repr(value)
    if "e" not in text:
        return text
    mantissa, exponent = text.split("e")
    exponent = int(exponent)
    if -7 < exponent < 21:
        return format(Decimal(text), "f")
    sign = "+" if exponent > 0 else "-"
    return f"{mantissa}e{sign}{abs(exponent)}"


def to_display_string(value: Any) -> str:
    """Row value as text: None -> "", 5.0 -> "5", 99.99 -> "99.99", 1e-7 -> "1e-7", True -> "true" """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _format_float(value)
    return str(value)


def interpolate_pattern(pattern: Optional[str], values: Mapping[str, Any]) -> str:
    """
    Replace every ``{variable}`` in ``pattern`` with the matching row value.

    >>> interpolate_pattern("{brand} - {category}", {"brand": "Nike", "category": "Shoes"})
    'Nike - Shoes'
    >>> interpolate_pattern("{brand} - {missing}", {"brand": "Nike"})
    'Nike - {missing}'
    """
    if not pattern:
        return ""

    def _substitute(match: re.Match) -> str:
        name = match.group(1)
        if name not in values:
            return match.group(0)
        return to_display_string(values[name])

    return VARIABLE_PATTERN.sub(_substitute, pattern)


def extract_variables(pattern: Optional[str]) -> List[str]:
    """Distinct variable names in order of first appearance"""
    if not pattern:
        return []
    seen: List[str] = []
    for name in VARIABLE_PATTERN.findall(pattern):
        if name not in seen:
            seen.append(name)
    return seen


def missing_variables(pattern: Optional[str], values: Mapping[str, Any]) -> List[str]:
    """Variables referenced by ``pattern`` that ``values`` does not define"""
    return [name for name in extract_variables(pattern) if name not in values]


class NamingService:
    """Service for generating names for Campaign/AdGroup/Ad/Keyword from row data"""

    @staticmethod
    def campaign_name(pattern: str, row_data: Mapping[str, Any]) -> str:
        """Campaign name, trimmed. Empty means the row is excluded."""
        return interpolate_pattern(pattern, row_data).strip()

    @staticmethod
    def ad_group_name(pattern: str, row_data: Mapping[str, Any]) -> str:
        return interpolate_pattern(pattern, row_data).strip()

    @staticmethod
    def keyword_text(pattern: str, row_data: Mapping[str, Any]) -> str:
        return interpolate_pattern(pattern, row_data).strip()

    @staticmethod
    def optional_text(pattern: Optional[str], row_data: Mapping[str, Any]) -> Optional[str]:
        """Ad copy field: None when the template leaves the field unset"""
        if not pattern:
            return None
        return interpolate_pattern(pattern, row_data)
