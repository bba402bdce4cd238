"""
Type inference from sample cell values.

Each sample is put in exactly one bucket (first match wins):
integer, decimal, date, boolean, or unclassified. The column type is the
first bucket, checked in the order boolean, date, decimal, integer, that
holds at least 80% of the non-blank samples.
"""
import re
from typing import Dict, List

from .models import SqlType

INTEGER = re.compile(r'^-?\d+$')
DECIMAL = re.compile(r'^-?\d+[.,]\d+$')
DATE_PATTERNS = (
    re.compile(r'^\d{4}-\d{2}-\d{2}'),      # 2024-01-31, 2024-01-31 10:00:00.000
    re.compile(r'^\d{2}/\d{2}/\d{4}'),      # 31/01/2024
    re.compile(r'^\d{4}/\d{2}/\d{2}'),      # 2024/01/31
    re.compile(r'^\d{8}$'),                 # 20240131
)
BOOLEAN_VALUES = {'true', 'false', '1', '0', 'yes', 'no', 'si', 'y', 'n'}

MAJORITY = 0.8

# 10+ significant digits covers everything outside the signed 32-bit range
# and also 10-digit identifiers at the top of it (e.g. 2147483647)
BIGINT_DIGITS = 10

# Decision order matters: a column that is both boolean and date-like is BIT
DECISION_ORDER = (
    ('boolean', SqlType.BIT),
    ('date', SqlType.DATE),
    ('decimal', SqlType.DECIMAL),
    ('integer', SqlType.INT),
)


def is_blank(value) -> bool:
    """Blank, whitespace-only or literal NULL."""
    if value is None:
        return True
    s = str(value).strip()
    return not s or s == 'NULL'


def classify_value(value: str) -> str:
    """Classify one non-blank sample into its type bucket."""
    s = str(value).strip()

    if INTEGER.match(s):
        return 'integer'
    if DECIMAL.match(s):
        return 'decimal'
    if any(p.match(s) for p in DATE_PATTERNS):
        return 'date'
    if s.lower() in BOOLEAN_VALUES:
        return 'boolean'
    return 'unclassified'


def _needs_bigint(value: str) -> bool:
    return len(value.lstrip('-').lstrip('0')) >= BIGINT_DIGITS


def infer_type(values: List[str]) -> SqlType:
    """
    Infer the best-fit SQL type for a column from its sample values.

    Returns VARCHAR when there are no usable samples or no bucket reaches
    the majority threshold. Never raises on malformed values.
    """
    samples = [str(v).strip() for v in values if not is_blank(v)]
    if not samples:
        return SqlType.VARCHAR

    counts: Dict[str, int] = {'integer': 0, 'decimal': 0, 'date': 0, 'boolean': 0, 'unclassified': 0}
    for s in samples:
        counts[classify_value(s)] += 1

    total = len(samples)
    for bucket, sql_type in DECISION_ORDER:
        if counts[bucket] / total >= MAJORITY:
            if sql_type is SqlType.INT:
                if any(INTEGER.match(s) and _needs_bigint(s) for s in samples):
                    return SqlType.BIGINT
            return sql_type

    return SqlType.VARCHAR
