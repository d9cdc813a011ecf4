"""
Schema Model

Database schema object graph and the semantic data types of its columns.
"""

from .data_type import (
    DataType,
    PortableType,
    PORTABLE_TYPES,
    classify,
    normalize_portable_hint,
    resolve_numeric_width,
)
from .model import (
    DatabaseArgument,
    DatabaseColumn,
    DatabaseConstraint,
    DatabaseForeignKey,
    DatabaseSchema,
    DatabaseStoredProcedure,
    DatabaseTable,
)

__all__ = [
    'DataType',
    'PortableType',
    'PORTABLE_TYPES',
    'classify',
    'normalize_portable_hint',
    'resolve_numeric_width',
    'DatabaseArgument',
    'DatabaseColumn',
    'DatabaseConstraint',
    'DatabaseForeignKey',
    'DatabaseSchema',
    'DatabaseStoredProcedure',
    'DatabaseTable',
]
