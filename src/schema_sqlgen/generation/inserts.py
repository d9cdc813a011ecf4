"""
Data Insert Script Generator

Renders INSERT statements for rows of a table, formatting each value as a
dialect literal (quoted strings, Oracle TO_DATE, binary hex and so on).
"""

import logging
from typing import Any, Dict, Iterable, List, Optional

from ..schema.model import DatabaseTable
from .base import BaseScriptGenerator
from .config import GeneratorConfig
from .dialects import DialectProfile

logger = logging.getLogger(__name__)


class InsertGenerator(BaseScriptGenerator):
    """Generates INSERT ... VALUES statements for table rows."""

    def __init__(
        self,
        profile: DialectProfile,
        table: DatabaseTable,
        config: Optional[GeneratorConfig] = None,
        rows: Optional[Iterable[Dict[str, Any]]] = None,
    ):
        super().__init__(profile, config)
        self.table = table
        self.rows: List[Dict[str, Any]] = list(rows or [])

    def add_row(self, row: Dict[str, Any]) -> None:
        self.rows.append(row)

    def write(self) -> str:
        """Render one INSERT per row; unknown column names are ignored."""
        table = self.table
        name = self.qualified_name(table.name, table.schema_owner)
        statements = [self.insert_statement(row, name) for row in self.rows]
        statements = [s for s in statements if s]

        if not statements:
            return ''

        identity_insert = self._identity_insert(name)
        if identity_insert:
            statements.insert(0, identity_insert.format(state='ON'))
            statements.append(identity_insert.format(state='OFF'))

        logger.debug(f"Rendered {len(self.rows)} {self.profile.display_name} inserts for {table.name}")
        return '\n'.join(statements) + '\n'

    def insert_statement(self, row: Dict[str, Any], qualified_name: str) -> Optional[str]:
        """Render a single INSERT for a row mapping column name -> value."""
        columns = []
        values = []
        for column in self.table.columns:
            if column.name not in row:
                continue
            target = self.profile.find_type(column.db_data_type)
            columns.append(self.profile.quote_identifier(column.name))
            values.append(self.profile.format_literal(row[column.name], target))

        if not columns:
            logger.warning(f"Row has no columns of table {self.table.name}, skipped")
            return None

        return (
            f"INSERT INTO {qualified_name} ({', '.join(columns)}) "
            f"VALUES ({', '.join(values)}){self.profile.statement_terminator}"
        )

    def _identity_insert(self, qualified_name: str) -> Optional[str]:
        """SET IDENTITY_INSERT template when rows supply identity values."""
        if not self.profile.identity_insert_format:
            return None
        identity_columns = [c.name for c in self.table.columns if c.is_identity]
        if not any(name in row for row in self.rows for name in identity_columns):
            return None
        return self.profile.identity_insert_format.replace('{table}', qualified_name)
