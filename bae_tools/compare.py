"""
Comparing tag values against a literal, for the advanced filter

If both sides look like numbers they're compared as floats. Otherwise only equality
makes sense, so the ordering operators fall back to it: "=", ">=" and "<=" become a
textual equality check, "!=" a textual inequality check, and ">" and "<" never match.
"""

import logging
import operator as op
from typing import Callable, Optional, Union

from bae_tools.addressbook.tag import Tag
from bae_tools.enums import Operator

logger = logging.getLogger(__name__)

NUMERIC_OPS: dict[Operator, Callable[[float, float], bool]] = {
    Operator.EQ: op.eq,
    Operator.NE: op.ne,
    Operator.GT: op.gt,
    Operator.LT: op.lt,
    Operator.GE: op.ge,
    Operator.LE: op.le,
}

TEXT_OPS: dict[Operator, Callable[[str, str], bool]] = {
    Operator.EQ: op.eq,
    Operator.NE: op.ne,
    Operator.GT: lambda a, b: False,
    Operator.LT: lambda a, b: False,
    Operator.GE: op.eq,
    Operator.LE: op.eq,
}


def try_parse_number(s: Optional[str]) -> Optional[float]:
    """
    Parse a float, returning None instead of raising if it isn't one. Digit
    separators like "1_000" aren't numbers here.
    """
    if not s or "_" in s:
        return None
    try:
        return float(s)
    except ValueError:
        return None


def compare(operator: Union[Operator, str], tag: Tag, literal: str) -> bool:
    """
    Returns whether the tag's value satisfies `<value> <operator> <literal>`. A tag
    without a value is treated as having an empty one.
    """
    try:
        operator = Operator(operator)
    except ValueError:
        logger.warning(f"Unrecognized operator: {operator!r}")
        return False

    value = tag.value if tag.value is not None else ""
    left = try_parse_number(value)
    right = try_parse_number(literal)
    if left is not None and right is not None:
        return NUMERIC_OPS[operator](left, right)

    return TEXT_OPS[operator](value, literal)
