"""Header row detection for pasted result sets - scored heuristic, no LLM needed"""
import re
from typing import List

# Substrings that usually show up in column names (Spanish + English)
HEADER_KEYWORDS = (
    'CODIGO', 'CODE', 'NOMBRE', 'NAME', 'FECHA', 'DATE',
    'TIPO', 'TYPE', 'ID', 'NUM', 'COD',
)

ALL_DIGITS = re.compile(r'^\d+$')
DATE_PREFIX = re.compile(r'^(\d{4}-\d{2}-\d{2}|\d{2}/\d{2}/\d{4})')
UPPER_IDENTIFIER = re.compile(r'^[A-Z_]+$')

MAX_HEADER_LENGTH = 50


def _token_score(token: str) -> int:
    score = 0

    if '_' in token:
        score += 2

    if ALL_DIGITS.match(token):
        score -= 2

    if DATE_PREFIX.match(token):
        score -= 2

    upper = token.upper()
    if any(kw in upper for kw in HEADER_KEYWORDS):
        score += 1

    if len(token) > MAX_HEADER_LENGTH:
        score -= 1

    if UPPER_IDENTIFIER.match(token) and len(token) > 2:
        score += 1

    # Looks like an email address
    if '@' in token and '.' in token:
        score -= 2

    return score


def header_score(tokens: List[str]) -> int:
    """
    Score how much a row of tokens looks like column names.

    Positive points for identifier-ish tokens (underscores, keywords,
    UPPER_CASE), negative points for values (numbers, dates, emails,
    long free text). Empty and NULL cells are ignored.
    """
    return sum(
        _token_score(token)
        for token in tokens
        if token and token != 'NULL'
    )


def looks_like_header_row(tokens: List[str]) -> bool:
    """True when the row scores strictly positive as a header."""
    return header_score(tokens) > 0
