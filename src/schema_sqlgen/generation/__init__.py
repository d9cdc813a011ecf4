"""
Script Generation

Dialect profiles and the generators that render table DDL, CRUD
procedures and data inserts from a schema model.
"""

from .base import BaseScriptGenerator
from .config import GeneratorConfig, SqlType
from .dialects import BUILTIN_PROFILES, DialectProfile
from .inserts import InsertGenerator
from .procedures import ProcedureGenerator
from .registry import (
    DdlGeneratorFactory,
    DialectRegistry,
    get_dialect_profile,
    list_available_dialects,
    register_dialect,
)
from .tables import AllTablesGenerator, ResolvedType, TableGenerator, resolve_rendered_type
from .writer import ScriptWriter, open_script

__all__ = [
    'BaseScriptGenerator',
    'GeneratorConfig',
    'SqlType',
    'BUILTIN_PROFILES',
    'DialectProfile',
    'InsertGenerator',
    'ProcedureGenerator',
    'DdlGeneratorFactory',
    'DialectRegistry',
    'get_dialect_profile',
    'list_available_dialects',
    'register_dialect',
    'AllTablesGenerator',
    'ResolvedType',
    'TableGenerator',
    'resolve_rendered_type',
    'ScriptWriter',
    'open_script',
]
