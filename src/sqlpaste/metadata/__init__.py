"""Column metadata heuristics and summaries"""
from .naming import is_key_candidate, describe_column
from .summary import summarize_columns, columns_to_dataframe
