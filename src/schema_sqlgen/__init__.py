"""
schema-sqlgen

Generates dialect-specific SQL scripts (CREATE TABLE, foreign keys, CRUD
stored procedures, data inserts) from an in-memory database schema.
"""

__version__ = "0.1.0"

from .exceptions import ScriptWriteError, SqlGenError, UnknownTypeError, UnsupportedDialectError
from .generation import (
    AllTablesGenerator,
    DdlGeneratorFactory,
    GeneratorConfig,
    InsertGenerator,
    ProcedureGenerator,
    SqlType,
    TableGenerator,
    get_dialect_profile,
    list_available_dialects,
    register_dialect,
)
from .schema import (
    DatabaseArgument,
    DatabaseColumn,
    DatabaseConstraint,
    DatabaseForeignKey,
    DatabaseSchema,
    DatabaseStoredProcedure,
    DatabaseTable,
    DataType,
    classify,
)

__all__ = [
    'ScriptWriteError',
    'SqlGenError',
    'UnknownTypeError',
    'UnsupportedDialectError',
    'AllTablesGenerator',
    'DdlGeneratorFactory',
    'GeneratorConfig',
    'InsertGenerator',
    'ProcedureGenerator',
    'SqlType',
    'TableGenerator',
    'get_dialect_profile',
    'list_available_dialects',
    'register_dialect',
    'DatabaseArgument',
    'DatabaseColumn',
    'DatabaseConstraint',
    'DatabaseForeignKey',
    'DatabaseSchema',
    'DatabaseStoredProcedure',
    'DatabaseTable',
    'DataType',
    'classify',
]
