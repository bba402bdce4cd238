"""Column list summaries and the DataFrame hand-off for the export layer"""
from collections import Counter
from typing import Dict, List

import pandas as pd

from ..parser.models import ColumnDescriptor

FRAME_COLUMNS = [
    'name', 'type', 'length', 'nullable', 'is_key_candidate', 'description',
    'used_in_visuals', 'participates_in_filters', 'is_metric',
]


def summarize_columns(columns: List[ColumnDescriptor]) -> Dict:
    """
    Count columns, key candidates and nullable columns.

    Returns:
        {"total": 12, "keys": 3, "nullable": 4, "types": {"INT": 5, ...}}
    """
    types = Counter(col.type.value for col in columns)
    return {
        'total': len(columns),
        'keys': sum(1 for col in columns if col.is_key_candidate),
        'nullable': sum(1 for col in columns if col.nullable),
        'types': dict(sorted(types.items())),
    }


def columns_to_dataframe(columns: List[ColumnDescriptor]) -> pd.DataFrame:
    """One row per column, in source order."""
    rows = [col.to_dict() for col in columns]
    df = pd.DataFrame(rows, columns=FRAME_COLUMNS)
    # Lists do not survive a CSV round trip
    df['used_in_visuals'] = df['used_in_visuals'].apply(lambda v: ', '.join(v) if isinstance(v, list) else v)
    return df
