"""Column-name heuristics: key candidates and readable descriptions"""
import re
from typing import List

KEY_SUFFIXES = ('_ID', '_CODIGO', '_CODE', '_KEY', '_PK', '_NUM')
KEY_NAMES = {'ID', 'CODIGO', 'CODE', 'KEY'}
KEY_PREFIXES = ('COD_',)

GENERATED_NAME = re.compile(r'^COL_(\d+)$', re.I)

# (suffix, template) checked before prefixes; {subject} is the rest of the name
SUFFIX_PATTERNS = [
    ('_ID', 'Identifier of {subject}'),
    ('_CODIGO', 'Code of {subject}'),
    ('_NOMBRE', 'Name of {subject}'),
    ('_FECHA', 'Date of {subject}'),
]

PREFIX_PATTERNS = [
    ('COD_', 'Code of {subject}'),
    ('NOM_', 'Name of {subject}'),
    ('NUM_', 'Number of {subject}'),
]


def is_key_candidate(name: str) -> bool:
    """
    Guess whether a column is a primary/foreign key from its name alone.

    Example: is_key_candidate("COD_PERIODO_ACADEMICO") -> True
    """
    upper = (name or '').strip().upper()
    if not upper:
        return False
    if upper in KEY_NAMES:
        return True
    return upper.endswith(KEY_SUFFIXES) or upper.startswith(KEY_PREFIXES)


def _humanize(words: List[str]) -> str:
    return ' '.join(w[:1].upper() + w[1:].lower() for w in words if w)


def describe_column(name: str) -> str:
    """
    Build a readable description from a SNAKE_CASE column name.

    Examples:
        PROGRAMA_ID -> "Identifier of programa"
        COD_PERIODO_ACADEMICO -> "Code of periodo academico"
        COL_3 -> "Column 3"
        NOMBRE_COMPLETO -> "Nombre Completo"
    """
    name = (name or '').strip()
    generated = GENERATED_NAME.match(name)
    if generated:
        return f"Column {int(generated.group(1))}"

    upper = name.upper()

    for suffix, template in SUFFIX_PATTERNS:
        if upper.endswith(suffix):
            subject = _humanize(name[:-len(suffix)].split('_')).lower()
            if subject:
                return template.format(subject=subject)

    for prefix, template in PREFIX_PATTERNS:
        if upper.startswith(prefix):
            subject = _humanize(name[len(prefix):].split('_')).lower()
            if subject:
                return template.format(subject=subject)

    return _humanize(name.split('_'))
