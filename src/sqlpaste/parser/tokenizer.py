"""
Line tokenizer for pasted query output.

Handles the three layouts people copy out of SSMS / SQL Developer:
- Grid copy: tab separated
- Text-mode or markdown-ish tables: pipe separated
- Fixed-width text: columns separated by 2+ spaces

The delimiter is chosen once per line. Header lines drop empty tokens,
data lines keep them so cells stay aligned with their column.
"""
import re
import logging
from typing import List, Optional

logger = logging.getLogger(__name__)

WHITESPACE_RUN = re.compile(r'\s{2,}')

# "-----  -----", "+----+----+", "====" rulers under text-mode headers
SEPARATOR_LINE = re.compile(r'^[\s\-=+|]+$')

# SSMS message footer: "(3 rows affected)", "(1 row affected)"
ROWS_AFFECTED = re.compile(r'^\(\d+\s+rows?\s+affected\)$', re.I)

# Minimum share of expected cells a data row needs to be sampled
MIN_ROW_FILL = 0.5


def split_lines(text: str) -> List[str]:
    """
    Split pasted text into meaningful lines.

    Only newlines end a line. Surrounding spaces are stripped but tabs are
    kept, so a grid row whose first or last cell is blank still has the
    right number of cells.
    """
    if not text:
        return []

    lines = []
    for raw in text.split('\n'):
        line = raw.strip(' \r')
        if not line.strip():
            continue
        if SEPARATOR_LINE.match(line):
            continue
        if ROWS_AFFECTED.match(line.strip()):
            continue
        lines.append(line)
    return lines


def is_bordered(line: str) -> bool:
    """True for a pipe table line drawn with outer borders: "| A | B |"."""
    if line is None or '\t' in line:
        return False
    s = line.strip()
    return len(s) > 1 and s.startswith('|') and s.endswith('|')


def tokenize_line(line: str, bordered: bool = False) -> List[str]:
    """
    Split one line into trimmed cell values.

    Delimiter precedence: tab, then pipe, then runs of 2+ whitespace.
    Empty cells are kept in position. Outer pipes are only dropped when
    the caller says the table is bordered, since "| 2 | 3 |" is also a
    borderless row whose first and last cells are blank.
    """
    if line is None:
        return []

    line = line.strip('\r\n')

    if '\t' in line:
        parts = line.split('\t')
    elif '|' in line:
        cells = line.strip()
        if bordered and is_bordered(cells):
            cells = cells[1:-1]
        parts = cells.split('|')
    else:
        parts = WHITESPACE_RUN.split(line.strip())

    return [p.strip() for p in parts]


def extract_header_tokens(line: str) -> List[str]:
    """Tokenize a header line, dropping empty names."""
    return [t for t in tokenize_line(line, bordered=is_bordered(line)) if t]


def align_row(tokens: List[str], expected: int) -> Optional[List[str]]:
    """
    Fit a data row to the expected column count.

    Rows with fewer than half the expected cells are rejected (None).
    Short rows are padded with '', long rows truncated.
    """
    if expected <= 0:
        return None
    if len(tokens) < expected * MIN_ROW_FILL:
        return None
    if len(tokens) < expected:
        return tokens + [''] * (expected - len(tokens))
    return tokens[:expected]


def extract_rows(lines: List[str], expected: int, bordered: bool = False) -> List[List[str]]:
    """
    Tokenize and align data lines, skipping rows that cannot be aligned.

    bordered comes from the header line and applies to every row.
    """
    rows = []
    skipped = 0
    for line in lines:
        row = align_row(tokenize_line(line, bordered), expected)
        if row is None:
            skipped += 1
            continue
        rows.append(row)

    if skipped:
        logger.debug(f"Skipped {skipped} row(s) with fewer than {expected * MIN_ROW_FILL:g} cells")
    return rows
