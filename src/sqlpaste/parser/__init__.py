"""Pasted SQL output parsing: tokenizer, header detection, type inference, schema building"""
from .models import SqlType, ColumnDescriptor, ParseResult, ValidationResult, Analysis
from .tokenizer import tokenize_line, extract_header_tokens, align_row, extract_rows, split_lines, is_bordered
from .header import header_score, looks_like_header_row
from .inference import classify_value, infer_type
from .builder import (
    parse_structure_dump,
    parse_result_set,
    merge_column_sets,
    map_vendor_type,
    validate_result_text,
    analyze_paste,
)
