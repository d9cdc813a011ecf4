"""
Table DDL Generators

CREATE TABLE for one table or a whole schema. Foreign keys are never
written inline: they follow all tables as ALTER TABLE statements, so the
script runs in a single pass whatever order the tables reference each other.
"""

import logging
import re
from dataclasses import dataclass
from typing import List, Optional

from ..exceptions import SqlGenError
from ..schema.data_type import DataType
from ..schema.model import DatabaseColumn, DatabaseForeignKey, DatabaseSchema, DatabaseTable
from .base import BaseScriptGenerator
from .config import GeneratorConfig
from .dialects import DialectProfile

logger = logging.getLogger(__name__)

_RENDERED_TYPE = re.compile(
    r'^\s*(?P<name>[A-Za-z_][A-Za-z0-9_ ]*?)\s*'
    r'(?:\(\s*(?P<first>\w+)\s*(?:,\s*(?P<second>\d+)\s*)?\))?\s*$'
)


class TableGenerator(BaseScriptGenerator):
    """Generates CREATE TABLE for a single table."""

    def __init__(
        self,
        profile: DialectProfile,
        table: DatabaseTable,
        config: Optional[GeneratorConfig] = None,
        schema: Optional[DatabaseSchema] = None,
    ):
        super().__init__(profile, config)
        self.table = table
        self.schema = schema

    def write(self) -> str:
        """Render the CREATE TABLE statement."""
        table = self.table
        if not table.columns:
            raise SqlGenError(f"Table {table.name} has no columns")

        definitions = [self.column_definition(column) for column in table.columns]
        primary_key = self.primary_key_clause()
        if primary_key:
            definitions.append(primary_key)

        body = ',\n'.join(f"    {d}" for d in definitions)
        name = self.qualified_name(table.name, table.schema_owner)
        logger.debug(f"Rendered {self.profile.display_name} table {table.name}")

        return f"""CREATE TABLE {name}
(
{body}
){self.profile.statement_terminator}"""

    def column_definition(self, column: DatabaseColumn) -> str:
        """Render one column clause: name, type, identity, default, nullability."""
        parts = [
            self.profile.quote_identifier(column.name),
            self.profile.render_type(column),
        ]
        if column.is_identity and self.profile.identity_clause:
            parts.append(self.profile.identity_clause)
        elif column.default_value:
            parts.append(f"DEFAULT {column.default_value}")

        nullable = column.nullable and not self.table.is_primary_key(column)
        parts.append("NULL" if nullable else "NOT NULL")
        return ' '.join(parts)

    def primary_key_clause(self) -> Optional[str]:
        """Render the PRIMARY KEY constraint clause, or None."""
        columns = self.table.primary_key_columns()
        if not columns:
            return None
        name = self.table.primary_key.name or f"PK_{self.table.name}"
        column_list = ', '.join(self.profile.quote_identifier(c.name) for c in columns)
        return f"CONSTRAINT {self.profile.quote_identifier(name)} PRIMARY KEY ({column_list})"

    def write_foreign_keys(self) -> List[str]:
        """Render one ALTER TABLE statement per foreign key of the table."""
        return [self.foreign_key_statement(fk) for fk in self.table.foreign_keys]

    def foreign_key_statement(self, foreign_key: DatabaseForeignKey) -> str:
        """Render ALTER TABLE ... ADD CONSTRAINT ... FOREIGN KEY ... REFERENCES."""
        profile = self.profile
        table = self.table
        name = foreign_key.name or f"FK_{table.name}_{foreign_key.referenced_table}"

        referenced_schema = foreign_key.referenced_schema or table.schema_owner
        referenced_columns = list(foreign_key.referenced_columns)
        if not referenced_columns and self.schema is not None:
            referenced = self.schema.find_table_by_name(foreign_key.referenced_table)
            if referenced is not None:
                referenced_columns = [c.name for c in referenced.primary_key_columns()]
        if not referenced_columns:
            referenced_columns = list(foreign_key.columns)

        columns = ', '.join(profile.quote_identifier(c) for c in foreign_key.columns)
        targets = ', '.join(profile.quote_identifier(c) for c in referenced_columns)

        return (
            f"ALTER TABLE {self.qualified_name(table.name, table.schema_owner)}\n"
            f"    ADD CONSTRAINT {profile.quote_identifier(name)} FOREIGN KEY ({columns})\n"
            f"    REFERENCES {self.qualified_name(foreign_key.referenced_table, referenced_schema)} ({targets})"
            f"{profile.statement_terminator}"
        )


class AllTablesGenerator(BaseScriptGenerator):
    """
    Generates DDL for every table in a schema.

    Tables are written in dependency order (referenced tables first); all
    foreign keys follow as a trailing ALTER TABLE block.
    """

    def __init__(
        self,
        profile: DialectProfile,
        schema: DatabaseSchema,
        config: Optional[GeneratorConfig] = None,
    ):
        super().__init__(profile, config)
        self.schema = schema

    def table_generator(self, table: DatabaseTable) -> TableGenerator:
        """TableGenerator sharing this generator's configuration."""
        generator = TableGenerator(self.profile, table, GeneratorConfig(), schema=self.schema)
        generator.include_schema = self.include_schema
        generator.manual_prefix = self.manual_prefix
        generator.format_parameter = self.format_parameter
        generator.cursor_parameter_name = self._cursor_parameter_name
        generator.encoding = self.encoding
        return generator

    def write(self) -> str:
        """Render all tables, then all foreign keys."""
        tables = self.schema.tables_in_dependency_order()
        generators = [self.table_generator(table) for table in tables]

        parts = [self._header(len(tables))]
        parts.extend(generator.write() for generator in generators)

        foreign_keys = []
        for generator in generators:
            foreign_keys.extend(generator.write_foreign_keys())
        if foreign_keys:
            parts.append(self._foreign_key_block(foreign_keys))

        logger.info(
            f"Rendered {len(tables)} tables and {len(foreign_keys)} foreign keys "
            f"for {self.profile.display_name}"
        )
        return '\n\n'.join(parts) + '\n'

    def _header(self, table_count: int) -> str:
        owner = self.schema.owner or '(default)'
        return (
            f"-- Schema: {owner}\n"
            f"-- Dialect: {self.profile.display_name}\n"
            f"-- Tables: {table_count}"
        )

    def _foreign_key_block(self, statements: List[str]) -> str:
        if self.profile.supports_alter_constraint:
            return '-- Foreign keys\n' + '\n\n'.join(statements)

        logger.warning(
            f"{self.profile.display_name} cannot add constraints to existing tables; "
            f"{len(statements)} foreign keys written as comments"
        )
        commented = '\n'.join(
            f"-- {line}" for statement in statements for line in statement.splitlines()
        )
        return (
            f"-- Foreign keys ({self.profile.display_name} does not support "
            f"ALTER TABLE ADD CONSTRAINT)\n{commented}"
        )


@dataclass
class ResolvedType:
    """A rendered column type parsed back into its dialect type and sizes."""
    data_type: DataType
    length: Optional[int] = None
    precision: Optional[int] = None
    scale: Optional[int] = None


def resolve_rendered_type(profile: DialectProfile, rendered: str) -> Optional[ResolvedType]:
    """
    Parse a rendered type ("DECIMAL(10,2)", "VARCHAR2(15)") back into the
    dialect DataType and the sizes its create format carried.

    Returns None if the text does not match any type of the dialect.
    """
    match = _RENDERED_TYPE.match(rendered)
    if not match:
        return None

    types = list({id(t): t for t in profile.type_table.values()}.values())
    normalized = rendered.replace(' ', '').upper()

    # fixed formats (NUMBER(10), VARCHAR(MAX)) carry no sizes
    for data_type in types:
        if data_type.create_format and data_type.create_format.replace(' ', '').upper() == normalized:
            return ResolvedType(data_type)

    name = ' '.join(match.group('name').split()).upper()
    first, second = match.group('first'), match.group('second')
    if first is None or not first.isdigit():
        return None

    for data_type in types:
        if data_type.type_name.upper() != name or data_type.placeholder_count() == 0:
            continue
        if data_type.is_numeric:
            return ResolvedType(
                data_type,
                precision=int(first),
                scale=int(second) if second is not None else None,
            )
        return ResolvedType(data_type, length=int(first))
    return None
