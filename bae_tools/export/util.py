"""
Export utility functions
"""

import logging
import re
from collections.abc import Iterable, Mapping

logger = logging.getLogger(__name__)

# Characters dropped from non-tag cells in TXT exports
TXT_STRIP_RE = re.compile(r'["\\,\r\n]')


def extract_headers(records: Iterable[Mapping[str, str]]) -> list[str]:
    """
    Returns the union of the keys of all records, in the order they were first seen
    """
    headers: dict[str, None] = {}
    for record in records:
        for key in record:
            headers.setdefault(key, None)
    return list(headers)


def format_txt_tags(cell: str) -> str:
    """
    Format a flattened tags cell, like "a, b : 1", as "[ a, b : 1 ]"
    """
    cleaned = re.sub(r'[{}"\r\n]', "", cell)
    tags = [t.strip() for t in cleaned.split(",")]
    return "[ " + ", ".join(tags) + " ]"


def clean_txt_cell(cell: str) -> str:
    return TXT_STRIP_RE.sub("", cell)
