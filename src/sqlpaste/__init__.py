"""sqlpaste - infer column schemas from pasted SQL query output"""
from .parser import (
    SqlType,
    ColumnDescriptor,
    ParseResult,
    ValidationResult,
    Analysis,
    tokenize_line,
    looks_like_header_row,
    infer_type,
    parse_structure_dump,
    parse_result_set,
    merge_column_sets,
    validate_result_text,
    analyze_paste,
)
from .metadata import is_key_candidate, describe_column, summarize_columns, columns_to_dataframe

__version__ = '0.1.0'
