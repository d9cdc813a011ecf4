"""
Schema Object Graph

Tables, columns, keys and stored procedures as supplied by a schema reader.
Generators borrow these objects for one render call and never mutate them.
"""

import heapq
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .data_type import DataType

logger = logging.getLogger(__name__)


@dataclass
class DatabaseColumn:
    """A table column."""
    name: str
    data_type: Optional[DataType] = None
    nullable: bool = True
    length: Optional[int] = None
    precision: Optional[int] = None
    scale: Optional[int] = None
    is_identity: bool = False
    default_value: Optional[str] = None  # raw SQL expression
    table_name: Optional[str] = None

    @property
    def db_data_type(self) -> Optional[str]:
        """Native type name of the column."""
        return self.data_type.type_name if self.data_type else None

    def net_code_name(self) -> Optional[str]:
        """Portable name corrected for this column's precision/scale."""
        if self.data_type is None:
            return None
        return self.data_type.net_code_name(self)


@dataclass
class DatabaseArgument:
    """A stored procedure argument."""
    name: str
    data_type: Optional[DataType] = None
    length: Optional[int] = None
    precision: Optional[int] = None
    scale: Optional[int] = None
    ordinal: int = 0
    direction: str = 'in'  # 'in', 'out', 'inout'
    is_cursor: bool = False

    @property
    def is_output(self) -> bool:
        return self.direction in ('out', 'inout')

    @classmethod
    def from_column(cls, column: DatabaseColumn, name: str, ordinal: int) -> 'DatabaseArgument':
        """Create an input argument shaped like a column."""
        return cls(
            name=name,
            data_type=column.data_type,
            length=column.length,
            precision=column.precision,
            scale=column.scale,
            ordinal=ordinal,
        )


@dataclass
class DatabaseConstraint:
    """Primary key or unique constraint."""
    name: Optional[str]
    columns: List[str] = field(default_factory=list)


@dataclass
class DatabaseForeignKey:
    """A foreign key from table_name(columns) to referenced_table(referenced_columns)."""
    name: Optional[str]
    table_name: str
    referenced_table: str
    columns: List[str] = field(default_factory=list)
    referenced_columns: List[str] = field(default_factory=list)
    referenced_schema: Optional[str] = None


@dataclass
class DatabaseTable:
    """A table with ordered columns, primary key and foreign keys."""
    name: str
    schema_owner: Optional[str] = None
    columns: List[DatabaseColumn] = field(default_factory=list)
    primary_key: Optional[DatabaseConstraint] = None
    foreign_keys: List[DatabaseForeignKey] = field(default_factory=list)

    def add_column(self, column: DatabaseColumn) -> DatabaseColumn:
        """Append a column and link it back to this table."""
        column.table_name = self.name
        self.columns.append(column)
        return column

    def add_foreign_key(self, foreign_key: DatabaseForeignKey) -> DatabaseForeignKey:
        foreign_key.table_name = self.name
        self.foreign_keys.append(foreign_key)
        return foreign_key

    def find_column(self, name: str) -> Optional[DatabaseColumn]:
        """Find a column by name (case-insensitive)."""
        lowered = name.lower()
        for column in self.columns:
            if column.name.lower() == lowered:
                return column
        return None

    def primary_key_columns(self) -> List[DatabaseColumn]:
        """Primary key columns in key order."""
        if not self.primary_key:
            return []
        columns = []
        for name in self.primary_key.columns:
            column = self.find_column(name)
            if column is None:
                logger.warning(f"Primary key column {name} not found in table {self.name}")
                continue
            columns.append(column)
        return columns

    def is_primary_key(self, column: DatabaseColumn) -> bool:
        if not self.primary_key:
            return False
        return column.name.lower() in (c.lower() for c in self.primary_key.columns)


@dataclass
class DatabaseStoredProcedure:
    """A stored procedure (optionally inside a package)."""
    name: str
    schema_owner: Optional[str] = None
    package: Optional[str] = None
    arguments: List[DatabaseArgument] = field(default_factory=list)

    def add_argument(self, argument: DatabaseArgument) -> DatabaseArgument:
        argument.ordinal = len(self.arguments)
        self.arguments.append(argument)
        return argument


@dataclass
class DatabaseSchema:
    """The whole schema: ordered tables and stored procedures."""
    owner: Optional[str] = None
    tables: List[DatabaseTable] = field(default_factory=list)
    stored_procedures: List[DatabaseStoredProcedure] = field(default_factory=list)

    def add_table(self, table: DatabaseTable) -> DatabaseTable:
        if table.schema_owner is None:
            table.schema_owner = self.owner
        self.tables.append(table)
        return table

    def find_table_by_name(self, name: str) -> Optional[DatabaseTable]:
        """Find a table by name (case-insensitive)."""
        lowered = name.lower()
        for table in self.tables:
            if table.name.lower() == lowered:
                return table
        return None

    def tables_in_dependency_order(self) -> List[DatabaseTable]:
        """
        Order tables so referenced tables come before the tables referencing them.

        Kahn's algorithm with declaration order as the tie-break. Tables left
        over by a foreign-key cycle are appended in declaration order, so
        every table appears exactly once.
        """
        position: Dict[str, int] = {t.name.lower(): i for i, t in enumerate(self.tables)}
        depends_on: Dict[int, set] = {i: set() for i in range(len(self.tables))}
        dependents: Dict[int, set] = {i: set() for i in range(len(self.tables))}

        for i, table in enumerate(self.tables):
            for fk in table.foreign_keys:
                target = position.get(fk.referenced_table.lower())
                # self references and tables outside the schema impose no order
                if target is None or target == i:
                    continue
                depends_on[i].add(target)
                dependents[target].add(i)

        # heap of declaration positions keeps ties in declaration order
        ready = [i for i in range(len(self.tables)) if not depends_on[i]]
        heapq.heapify(ready)
        ordered: List[int] = []
        emitted = set()
        while ready:
            current = heapq.heappop(ready)
            ordered.append(current)
            emitted.add(current)
            for dependent in dependents[current]:
                depends_on[dependent].discard(current)
                if not depends_on[dependent]:
                    heapq.heappush(ready, dependent)

        if len(ordered) < len(self.tables):
            cyclic = [self.tables[i].name for i in range(len(self.tables)) if i not in emitted]
            logger.warning(f"Foreign key cycle between tables: {', '.join(cyclic)}")
            ordered.extend(i for i in range(len(self.tables)) if i not in emitted)

        return [self.tables[i] for i in ordered]
