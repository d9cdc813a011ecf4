"""
CRUD Procedure Generator

Uses Jinja2 templates to render insert/update/delete/select-by-key stored
procedures for a table. Dialects with package semantics (Oracle) get one
package specification and body holding all four procedures.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from ..exceptions import UnsupportedDialectError
from ..schema.model import DatabaseArgument, DatabaseColumn, DatabaseStoredProcedure, DatabaseTable
from .base import BaseScriptGenerator
from .config import GeneratorConfig
from .dialects import DialectProfile

logger = logging.getLogger(__name__)


@dataclass
class ProcedureArgument:
    """An argument as it appears in the rendered procedure."""
    argument: DatabaseArgument
    name: str
    sql_type: str
    declaration: str
    reference: str = ''
    column: str = ''
    column_reference: str = ''
    set_target: str = ''
    is_key: bool = False


@dataclass
class ProcedureDefinition:
    """One procedure ready for rendering."""
    operation: str
    procedure: DatabaseStoredProcedure
    quoted_name: str
    qualified_name: str
    arguments: List[ProcedureArgument] = field(default_factory=list)
    cursor: Optional[ProcedureArgument] = None
    insert_columns: List[str] = field(default_factory=list)
    insert_values: List[str] = field(default_factory=list)
    assignments: List[str] = field(default_factory=list)
    conditions: List[str] = field(default_factory=list)
    select_columns: List[str] = field(default_factory=list)

    @property
    def declarations(self) -> List[str]:
        declarations = [a.declaration for a in self.arguments]
        if self.cursor is not None:
            declarations.append(self.cursor.declaration)
        return declarations

    def signature(self, indent: str = '    ', empty: str = '') -> str:
        """Parenthesised argument list, one argument per line."""
        declarations = self.declarations
        if not declarations:
            return empty
        joined = ',\n'.join(f"{indent}{d}" for d in declarations)
        return f"(\n{joined})"


class ProcedureGenerator(BaseScriptGenerator):
    """
    Generates CRUD stored procedures for a table.

    Procedure names are manual_prefix + table + "_" + operation. In a
    package the package is named manual_prefix + table and the procedures
    inside are table + "_" + operation.
    """

    def __init__(
        self,
        profile: DialectProfile,
        table: DatabaseTable,
        config: Optional[GeneratorConfig] = None,
    ):
        if not profile.supports_procedures:
            raise UnsupportedDialectError(
                f"{profile.display_name} does not support stored procedures"
            )
        super().__init__(profile, config)
        self.table = table
        self.template_dir = Path(__file__).parent / 'templates'
        self.jinja_env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )

    def procedure_name(self, operation: str) -> str:
        """Unquoted name of the procedure for an operation."""
        if self.profile.uses_packages:
            return f"{self.table.name}_{operation}"
        return f"{self.manual_prefix}{self.table.name}_{operation}"

    def package_name(self) -> Optional[str]:
        """Unquoted package name, or None for standalone procedures."""
        if not self.profile.uses_packages:
            return None
        return f"{self.manual_prefix}{self.table.name}"

    def procedures(self) -> List[DatabaseStoredProcedure]:
        """The procedures this generator renders, as schema objects."""
        return [definition.procedure for definition in self.definitions()]

    def definitions(self) -> List[ProcedureDefinition]:
        """Build the procedure definitions for the table."""
        table = self.table
        definitions = []

        insertable = [c for c in table.columns if not c.is_identity]
        if insertable:
            definitions.append(self._insert(insertable))
        else:
            logger.warning(f"Table {table.name} has no insertable columns, skipping Insert")

        keys = table.primary_key_columns()
        if not keys:
            logger.warning(f"Table {table.name} has no primary key, skipping Update/Delete/Select")
            return definitions

        values = [c for c in table.columns if not table.is_primary_key(c)]
        if values:
            definitions.append(self._update())
        else:
            logger.warning(f"Table {table.name} has only key columns, skipping Update")
        definitions.append(self._delete(keys))
        definitions.append(self._select(keys))
        return definitions

    def write(self) -> str:
        """Render all procedures as one script."""
        definitions = self.definitions()
        template = self.jinja_env.get_template(self.profile.procedure_template)

        package = self.package_name()
        text = template.render(
            table=self.table,
            table_name=self.qualified_name(self.table.name, self.table.schema_owner),
            procedures=definitions,
            package=self.qualified_name(package, self.table.schema_owner) if package else None,
            package_short=self.profile.quote_identifier(package) if package else None,
            dialect=self.profile.display_name,
        )
        logger.debug(
            f"Rendered {len(definitions)} {self.profile.display_name} procedures for {self.table.name}"
        )
        return text

    def _definition(self, operation: str, columns: List[DatabaseColumn]) -> ProcedureDefinition:
        table = self.table
        name = self.procedure_name(operation)
        procedure = DatabaseStoredProcedure(
            name=name,
            schema_owner=table.schema_owner,
            package=self.package_name(),
        )

        quoted_name = self.profile.quote_identifier(name)
        if self.profile.uses_packages:
            qualified_name = quoted_name
        else:
            qualified_name = self.qualified_name(name, table.schema_owner)

        definition = ProcedureDefinition(
            operation=operation,
            procedure=procedure,
            quoted_name=quoted_name,
            qualified_name=qualified_name,
        )
        for column in columns:
            argument = procedure.add_argument(DatabaseArgument.from_column(
                column,
                self.profile.parameter_name(column.name, self.format_parameter),
                0,
            ))
            definition.arguments.append(self._argument(argument, column, quoted_name))
        return definition

    def _argument(self, argument: DatabaseArgument, column: DatabaseColumn, quoted_name: str) -> ProcedureArgument:
        profile = self.profile
        sql_type = profile.parameter_type(argument)

        reference = argument.name
        if profile.qualify_parameters:
            reference = f"{quoted_name}.{argument.name}"

        quoted_column = profile.quote_identifier(column.name)
        column_reference = quoted_column
        if profile.qualify_columns:
            column_reference = f"{profile.quote_identifier(self.table.name)}.{quoted_column}"

        return ProcedureArgument(
            argument=argument,
            name=argument.name,
            sql_type=sql_type,
            declaration=profile.declare_argument(argument.name, sql_type, 'IN'),
            reference=reference,
            column=quoted_column,
            column_reference=column_reference,
            set_target=column_reference if profile.qualify_set_targets else quoted_column,
            is_key=self.table.is_primary_key(column),
        )

    def _conditions(self, arguments: List[ProcedureArgument]) -> List[str]:
        return [f"{a.column_reference} = {a.reference}" for a in arguments]

    def _insert(self, columns: List[DatabaseColumn]) -> ProcedureDefinition:
        definition = self._definition('Insert', columns)
        definition.insert_columns = [a.column for a in definition.arguments]
        definition.insert_values = [a.reference for a in definition.arguments]
        return definition

    def _update(self) -> ProcedureDefinition:
        definition = self._definition('Update', self.table.columns)
        definition.assignments = [
            f"{a.set_target} = {a.reference}" for a in definition.arguments if not a.is_key
        ]
        definition.conditions = self._conditions([a for a in definition.arguments if a.is_key])
        return definition

    def _delete(self, keys: List[DatabaseColumn]) -> ProcedureDefinition:
        definition = self._definition('Delete', keys)
        definition.conditions = self._conditions(definition.arguments)
        return definition

    def _select(self, keys: List[DatabaseColumn]) -> ProcedureDefinition:
        definition = self._definition('Select', keys)
        definition.conditions = self._conditions(definition.arguments)

        profile = self.profile
        table_prefix = f"{profile.quote_identifier(self.table.name)}." if profile.qualify_columns else ''
        definition.select_columns = [
            f"{table_prefix}{profile.quote_identifier(c.name)}" for c in self.table.columns
        ]

        if profile.uses_cursor_parameter:
            cursor_name = self.cursor_parameter_name
            cursor = definition.procedure.add_argument(DatabaseArgument(
                name=cursor_name,
                direction='out',
                is_cursor=True,
            ))
            definition.cursor = ProcedureArgument(
                argument=cursor,
                name=cursor_name,
                sql_type=profile.cursor_type,
                declaration=profile.declare_argument(cursor_name, profile.cursor_type, 'OUT'),
                reference=cursor_name,
            )
        return definition
