"""Column schema dataclasses produced by the parser"""
from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Dict, List, Optional


class SqlType(str, Enum):
    """Coarse SQL types a column can be documented with."""
    VARCHAR = 'VARCHAR'
    NVARCHAR = 'NVARCHAR'
    TEXT = 'TEXT'
    INT = 'INT'
    BIGINT = 'BIGINT'
    DECIMAL = 'DECIMAL'
    NUMBER = 'NUMBER'
    FLOAT = 'FLOAT'
    DATE = 'DATE'
    DATETIME = 'DATETIME'
    DATETIME2 = 'DATETIME2'
    BIT = 'BIT'

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: Optional[str]) -> 'SqlType':
        """Look up a member by name, falling back to VARCHAR."""
        if isinstance(value, SqlType):
            return value
        try:
            return cls(str(value or '').strip().upper())
        except ValueError:
            return cls.VARCHAR


@dataclass
class ColumnDescriptor:
    """One detected or declared column"""
    name: str                       # Raw header token, trimmed
    type: SqlType = SqlType.VARCHAR
    length: str = ""                # Only filled from a structure dump
    nullable: bool = False          # Only filled from a structure dump
    is_key_candidate: bool = False
    description: str = ""
    # Owned by the documentation UI, never touched again by the parser
    used_in_visuals: List[str] = field(default_factory=list)
    participates_in_filters: bool = False
    is_metric: bool = False

    def to_dict(self) -> dict:
        data = asdict(self)
        data['type'] = self.type.value
        return data

    @classmethod
    def from_dict(cls, data: dict) -> 'ColumnDescriptor':
        # Handle descriptors saved before a field existed
        return cls(
            name=data.get('name', ''),
            type=SqlType.parse(data.get('type')),
            length=str(data.get('length') or ''),
            nullable=bool(data.get('nullable', False)),
            is_key_candidate=bool(data.get('is_key_candidate', False)),
            description=data.get('description', ''),
            used_in_visuals=list(data.get('used_in_visuals', [])),
            participates_in_filters=bool(data.get('participates_in_filters', False)),
            is_metric=bool(data.get('is_metric', False)),
        )


@dataclass
class ParseResult:
    """Outcome of parsing a pasted result set"""
    columns: List[ColumnDescriptor] = field(default_factory=list)
    warning: Optional[str] = None
    sample_rows: List[List[str]] = field(default_factory=list)
    header_detected: bool = False

    def to_dict(self) -> dict:
        return {
            'columns': [c.to_dict() for c in self.columns],
            'warning': self.warning,
            'sample_rows': self.sample_rows,
            'header_detected': self.header_detected,
        }


@dataclass
class ValidationResult:
    """Quick pre-check of pasted result text"""
    valid: bool
    message: str


@dataclass
class Analysis:
    """Combined structure + results analysis for one table"""
    ok: bool
    columns: List[ColumnDescriptor] = field(default_factory=list)
    message: str = ""
    warnings: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return {
            'ok': self.ok,
            'message': self.message,
            'warnings': self.warnings,
            'columns': [c.to_dict() for c in self.columns],
        }
