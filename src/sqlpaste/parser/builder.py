"""
Schema builder - turns pasted text into ColumnDescriptor lists.

Three entry points:
1. parse_structure_dump: INFORMATION_SCHEMA.COLUMNS / ALL_TAB_COLUMNS output
2. parse_result_set: rows from a SELECT, types inferred from the values
3. merge_column_sets: structure as the base, upgraded with inferred types

Malformed input gives a degraded schema plus a warning, never an exception.
The one failure signal is an empty list from parse_structure_dump.
"""
import re
import logging
from dataclasses import replace
from typing import List, Optional, Tuple

from ..config import Settings, get_settings
from ..metadata.naming import describe_column, is_key_candidate
from .header import looks_like_header_row
from .inference import infer_type
from .models import Analysis, ColumnDescriptor, ParseResult, SqlType, ValidationResult
from .tokenizer import extract_header_tokens, extract_rows, is_bordered, split_lines, tokenize_line

logger = logging.getLogger(__name__)

# SQL Server and Oracle type names -> documented type
VENDOR_TYPES = {
    # Character
    'VARCHAR': SqlType.VARCHAR,
    'CHAR': SqlType.VARCHAR,
    'VARCHAR2': SqlType.VARCHAR,
    'CHARACTER': SqlType.VARCHAR,
    'NVARCHAR': SqlType.NVARCHAR,
    'NCHAR': SqlType.NVARCHAR,
    'NVARCHAR2': SqlType.NVARCHAR,
    'TEXT': SqlType.TEXT,
    'NTEXT': SqlType.TEXT,
    'CLOB': SqlType.TEXT,
    'NCLOB': SqlType.TEXT,
    'LONG': SqlType.TEXT,
    # Exact numeric
    'INT': SqlType.INT,
    'INTEGER': SqlType.INT,
    'SMALLINT': SqlType.INT,
    'TINYINT': SqlType.INT,
    'BIGINT': SqlType.BIGINT,
    'DECIMAL': SqlType.DECIMAL,
    'NUMERIC': SqlType.DECIMAL,
    'MONEY': SqlType.DECIMAL,
    'SMALLMONEY': SqlType.DECIMAL,
    'NUMBER': SqlType.NUMBER,
    # Approximate numeric
    'FLOAT': SqlType.FLOAT,
    'REAL': SqlType.FLOAT,
    'DOUBLE PRECISION': SqlType.FLOAT,
    'BINARY_FLOAT': SqlType.FLOAT,
    'BINARY_DOUBLE': SqlType.FLOAT,
    # Date / time
    'DATE': SqlType.DATE,
    'DATETIME': SqlType.DATETIME,
    'SMALLDATETIME': SqlType.DATETIME,
    'TIME': SqlType.DATETIME,
    'DATETIME2': SqlType.DATETIME2,
    'DATETIMEOFFSET': SqlType.DATETIME2,
    'TIMESTAMP': SqlType.DATETIME2,
    # Boolean
    'BIT': SqlType.BIT,
    'BOOLEAN': SqlType.BIT,
}

TYPE_SIZE = re.compile(r'\(([^)]*)\)')

NULLABLE_TRUE = {'YES', 'Y', '1'}

NO_TEXT_WARNING = "No text to analyze."
NO_HEADER_WARNING = (
    "Column headers were not detected in the first line; columns were named "
    "COL_1..COL_{count}. Paste the result including its header row to keep "
    "the real column names."
)
NO_DATA_WARNING = (
    "Not enough data rows to infer column types; all columns default to VARCHAR."
)


def split_type_size(raw_type: str) -> Tuple[str, str]:
    """
    Separate a declared type from its size.

    Example: split_type_size("varchar(50)") -> ("VARCHAR", "50")
    """
    raw = (raw_type or '').strip()
    size_match = TYPE_SIZE.search(raw)
    size = size_match.group(1).strip() if size_match else ''
    base = TYPE_SIZE.sub(' ', raw)
    base = ' '.join(base.split()).upper()
    return base, size


def map_vendor_type(raw_type: str) -> SqlType:
    """Map a SQL Server / Oracle type name to SqlType, defaulting to VARCHAR."""
    base, _ = split_type_size(raw_type)
    if base in VENDOR_TYPES:
        return VENDOR_TYPES[base]
    # "TIMESTAMP WITH TIME ZONE", "INT IDENTITY", ...
    first_word = base.split(' ')[0] if base else ''
    return VENDOR_TYPES.get(first_word, SqlType.VARCHAR)


def _new_column(name: str, sql_type: SqlType, length: str = '', nullable: bool = False) -> ColumnDescriptor:
    return ColumnDescriptor(
        name=name,
        type=sql_type,
        length=length,
        nullable=nullable,
        is_key_candidate=is_key_candidate(name),
        description=describe_column(name),
    )


def _find_header(headers: List[str], *needles: str) -> int:
    """Index of the first header containing any needle (case-insensitive), or -1."""
    for needle in needles:
        for i, h in enumerate(headers):
            if needle in h.upper():
                return i
    return -1


def parse_structure_dump(text: str) -> List[ColumnDescriptor]:
    """
    Parse a pasted column-metadata query.

    Expected shape (SQL Server):
        COLUMN_NAME    DATA_TYPE    CHARACTER_MAXIMUM_LENGTH    IS_NULLABLE
        PROGRAMA_ID    int          NULL                        NO

    Returns an empty list when the header has no name-like or no
    type-like field: the format was not recognised.
    """
    lines = split_lines(text)
    if len(lines) < 2:
        return []

    headers = extract_header_tokens(lines[0])
    upper_headers = [h.upper() for h in headers]

    has_name = any('COLUMN' in h or 'CAMPO' in h for h in upper_headers)
    has_type = any('DATA_TYPE' in h or 'TIPO' in h for h in upper_headers)
    if not has_name or not has_type:
        logger.debug(f"Structure header not recognised: {headers}")
        return []

    idx_name = _find_header(headers, 'COLUMN_NAME', 'CAMPO')
    if idx_name < 0:
        idx_name = _find_header(headers, 'COLUMN')
    idx_type = _find_header(headers, 'DATA_TYPE', 'TIPO')
    idx_length = _find_header(headers, 'LENGTH', 'LONGITUD')
    idx_nullable = _find_header(headers, 'NULLABLE', 'NULO')

    columns = []
    for row in extract_rows(lines[1:], len(headers), is_bordered(lines[0])):
        name = row[idx_name]
        if not name:
            logger.debug(f"Skipping structure row without a column name: {row}")
            continue

        raw_type = row[idx_type] or 'VARCHAR'
        _, declared_size = split_type_size(raw_type)

        length = row[idx_length] if idx_length >= 0 else declared_size
        if length.upper() == 'NULL':
            length = ''

        nullable = idx_nullable >= 0 and row[idx_nullable].upper() in NULLABLE_TRUE

        columns.append(_new_column(name, map_vendor_type(raw_type), length, nullable))

    return columns


def parse_result_set(text: str, settings: Optional[Settings] = None) -> ParseResult:
    """
    Parse pasted SELECT output and infer a column per header field.

    If the first line does not look like a header, columns are named
    COL_1..COL_N, the first line is kept as data and a warning is attached.
    With no usable data rows the columns stay VARCHAR, also with a warning.
    """
    settings = settings or get_settings()

    lines = split_lines(text)
    if not lines:
        return ParseResult(warning=NO_TEXT_WARNING)

    headers = extract_header_tokens(lines[0])
    bordered = is_bordered(lines[0])
    warning = None

    if headers and looks_like_header_row(headers):
        names = headers
        data_lines = lines[1:]
        header_detected = True
    else:
        first_row = tokenize_line(lines[0], bordered)
        names = [f"COL_{i}" for i in range(1, len(first_row) + 1)]
        data_lines = lines
        header_detected = False
        warning = NO_HEADER_WARNING.format(count=len(names))
        logger.debug(f"No header detected, generated {len(names)} column names")

    if not names:
        return ParseResult(warning=NO_TEXT_WARNING)

    rows = extract_rows(data_lines, len(names), bordered)

    if not rows:
        columns = [_new_column(name, SqlType.VARCHAR) for name in names]
        return ParseResult(
            columns=columns,
            warning=' '.join(w for w in (warning, NO_DATA_WARNING) if w),
            header_detected=header_detected,
        )

    columns = [
        _new_column(name, infer_type([row[i] for row in rows]))
        for i, name in enumerate(names)
    ]

    return ParseResult(
        columns=columns,
        warning=warning,
        sample_rows=[list(r) for r in rows[:settings.sample_rows]],
        header_detected=header_detected,
    )


def merge_column_sets(
    structure_columns: List[ColumnDescriptor],
    result_columns: List[ColumnDescriptor],
) -> List[ColumnDescriptor]:
    """
    Combine structure-derived and result-derived columns.

    Structure columns keep their length and nullability. Their type is only
    replaced when it is the VARCHAR default and the same-named result column
    (case-insensitive) inferred something more specific. Result-only columns
    are appended in their original order.
    """
    if not structure_columns:
        return list(result_columns)
    if not result_columns:
        return list(structure_columns)

    by_name = {}
    for col in result_columns:
        by_name.setdefault(col.name.upper(), col)

    merged = []
    for col in structure_columns:
        match = by_name.get(col.name.upper())
        if match and col.type == SqlType.VARCHAR and match.type != SqlType.VARCHAR:
            merged.append(replace(
                col,
                type=match.type,
                description=col.description or match.description,
                used_in_visuals=list(col.used_in_visuals),
            ))
        else:
            merged.append(replace(col, used_in_visuals=list(col.used_in_visuals)))

    seen = {col.name.upper() for col in merged}
    for col in result_columns:
        if col.name.upper() not in seen:
            merged.append(col)
            seen.add(col.name.upper())

    return merged


def validate_result_text(text: str) -> ValidationResult:
    """Check that pasted results have a header line and at least one row."""
    if not text or not text.strip():
        return ValidationResult(False, "The text is empty")

    lines = [l for l in text.split('\n') if l.strip()]
    if len(lines) < 2:
        return ValidationResult(False, "At least 2 lines are needed (headers and one data row)")

    return ValidationResult(True, "Valid format")


def analyze_paste(
    structure_text: str = '',
    result_text: str = '',
    settings: Optional[Settings] = None,
) -> Analysis:
    """
    Analyze whatever the user pasted for one table.

    - Structure only: columns straight from the metadata dump
    - Results only: columns inferred from the rows
    - Both: structure as the base, upgraded with inferred types
    """
    has_structure = bool(structure_text and structure_text.strip())
    has_results = bool(result_text and result_text.strip())

    if not has_structure and not has_results:
        return Analysis(False, message="Paste at least the column structure or some result rows")

    if has_structure and not has_results:
        columns = parse_structure_dump(structure_text)
        if not columns:
            return Analysis(False, message="Could not detect columns in the structure. Check the format.")
        return Analysis(True, columns, f"Detected {len(columns)} columns from the structure")

    if has_results and not has_structure:
        validation = validate_result_text(result_text)
        if not validation.valid:
            return Analysis(False, message=validation.message)

        result = parse_result_set(result_text, settings)
        warnings = [result.warning] if result.warning else []
        if not result.columns:
            return Analysis(False, message="Could not detect columns in the results. Check the format.",
                            warnings=warnings)
        return Analysis(True, result.columns, f"Detected {len(result.columns)} columns from the results",
                        warnings)

    structure_columns = parse_structure_dump(structure_text)
    result = parse_result_set(result_text, settings)
    warnings = [result.warning] if result.warning else []

    if not structure_columns and not result.columns:
        return Analysis(False, message="Could not detect columns. Check both formats.", warnings=warnings)

    if not structure_columns:
        warnings.insert(0, "Column structure format was not recognised; using result rows only.")

    columns = merge_column_sets(structure_columns, result.columns)
    return Analysis(True, columns, f"Merged {len(columns)} columns (structure + sample data)", warnings)
