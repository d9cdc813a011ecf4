"""
Exceptions raised while generating SQL scripts.
"""


class SqlGenError(Exception):
    """Base exception for script generation errors."""
    pass


class UnsupportedDialectError(SqlGenError):
    """Raised when a dialect tag has no registered profile."""
    pass


class UnknownTypeError(SqlGenError):
    """Raised when a column or argument type has no rule in the active dialect."""

    def __init__(self, type_name: str, dialect: str, owner: str = None):
        self.type_name = type_name
        self.dialect = dialect
        self.owner = owner
        where = f" (column {owner})" if owner else ""
        super().__init__(f"No {dialect} type for '{type_name}'{where}")


class ScriptWriteError(SqlGenError):
    """Raised when a script cannot be written to its target path."""

    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f"Cannot write script to {path}: {reason}")
