"""
SQL Dialect Profiles

Per-engine rules as data: identifier quoting, schema support, type tables,
procedure structure and literal formatting. One generator implementation
is parameterized by a profile instead of subclassing per dialect.
"""

import logging
import re
from dataclasses import dataclass, field
from datetime import date, datetime, time
from decimal import Decimal
from typing import Callable, Dict, FrozenSet, List, Optional, Sequence, Tuple, Union

from ..exceptions import UnknownTypeError
from ..schema.data_type import DataType
from .config import SqlType, identity

logger = logging.getLogger(__name__)

_SIMPLE_IDENTIFIER = re.compile(r'^[A-Za-z_][A-Za-z0-9_]*$')
_NON_IDENTIFIER = re.compile(r'[^A-Za-z0-9_]')

# (native names, create format, portable hint[, extra DataType kwargs])
TypeRow = Tuple


def build_type_table(rows: Sequence[TypeRow]) -> Dict[str, DataType]:
    """
    Build a lookup of lowercase native type name -> dialect DataType.

    Every name in a row (the dialect's own spelling plus the spellings
    other engines use for the same thing) points at one DataType.
    """
    table: Dict[str, DataType] = {}
    for row in rows:
        names, create_format, hint = row[0], row[1], row[2]
        extra = row[3] if len(row) > 3 else {}
        type_name = create_format.split('(', 1)[0].strip()
        data_type = DataType(type_name, hint, create_format=create_format, **extra)
        for name in names:
            table[name.lower()] = data_type
    return table


@dataclass(frozen=True)
class DialectProfile:
    """Rules for rendering SQL in one database engine."""
    sql_type: Union[SqlType, str]
    display_name: str

    # Identifiers
    quote_open: str = '"'
    quote_close: str = '"'
    quote_all: bool = True
    reserved_words: FrozenSet[str] = frozenset()
    supports_schema: bool = True

    # Types
    type_table: Dict[str, DataType] = field(default_factory=dict, hash=False, compare=False)
    unbounded_types: Dict[str, str] = field(default_factory=dict, hash=False, compare=False)
    length_limits: Dict[str, int] = field(default_factory=dict, hash=False, compare=False)
    integer_types: Dict[str, str] = field(default_factory=dict, hash=False, compare=False)
    identity_clause: str = ''

    # DDL
    supports_alter_constraint: bool = True
    statement_terminator: str = ';'

    # Procedures
    supports_procedures: bool = True
    uses_packages: bool = False
    uses_cursor_parameter: bool = False
    cursor_type: str = ''
    cursor_parameter_name: str = 'cursor'
    parameter_sigil: str = ''
    parameter_sizes: bool = True
    argument_format: str = '{name} {type}'
    qualify_columns: bool = False
    qualify_set_targets: bool = False
    qualify_parameters: bool = False
    procedure_template: str = ''

    # Literals
    boolean_literals: Tuple[str, str] = ('1', '0')
    binary_literal_format: str = "X'{}'"
    identity_insert_format: Optional[str] = None

    def quote_identifier(self, name: str) -> str:
        """Quote an identifier (table, column, procedure name)."""
        if not self.quote_all:
            if _SIMPLE_IDENTIFIER.match(name) and name.upper() not in self.reserved_words:
                return name
        escaped = name.replace(self.quote_close, self.quote_close * 2)
        return f"{self.quote_open}{escaped}{self.quote_close}"

    def qualify(self, name: str, schema: Optional[str], include_schema: bool = True) -> str:
        """Quote a name, prefixing the schema when requested and supported."""
        quoted = self.quote_identifier(name)
        if include_schema and schema and self.supports_schema:
            return f"{self.quote_identifier(schema)}.{quoted}"
        return quoted

    def find_type(self, type_name: Optional[str]) -> Optional[DataType]:
        """Dialect type for a native type name from any engine."""
        if not type_name:
            return None
        return self.type_table.get(type_name.strip().lower())

    def require_type(self, descriptor) -> DataType:
        """
        Dialect type for a column or argument.

        Raises:
            UnknownTypeError: If the native type has no rule in this dialect
        """
        source = descriptor.data_type
        source_name = source.type_name if source else None
        target = self.find_type(source_name)
        if target is None or not target.create_format:
            raise UnknownTypeError(
                source_name or '(none)',
                self.display_name,
                getattr(descriptor, 'name', None),
            )
        return target

    def render_type(self, descriptor) -> str:
        """
        Render the dialect type for a column or argument.

        Args:
            descriptor: Object with data_type, length, precision and scale

        Raises:
            UnknownTypeError: If the native type has no rule in this dialect
        """
        target = self.require_type(descriptor)
        bare = target.bare_name()
        length = descriptor.length
        limit = self.length_limits.get(bare.upper())
        if limit is not None and length is not None and length > limit:
            length = None

        rendered = target.format_create(length, descriptor.precision, descriptor.scale)
        if rendered is None:
            rendered = self.unbounded_types.get(bare.upper(), bare)
        return rendered

    def parameter_name(self, column_name: str, formatter: Callable[[str], str] = identity) -> str:
        """
        Procedure parameter name for a column: sigil + formatted name.

        Characters that cannot appear in an unquoted identifier are replaced
        with underscores.
        """
        name = formatter(column_name)
        cleaned = _NON_IDENTIFIER.sub('_', name)
        if cleaned != name:
            logger.warning(f"Parameter name '{name}' is not a valid identifier, using '{cleaned}'")
        return f"{self.parameter_sigil}{cleaned}"

    def parameter_type(self, argument) -> str:
        """
        Render the type of a procedure argument.

        Fixed-point arguments that resolve to a host integer width use the
        dialect's integer type, the same width a table column with the
        same precision/scale resolves to. Floating-point arguments keep
        their column type.

        Raises:
            UnknownTypeError: If the native type has no rule in this dialect
        """
        self.require_type(argument)
        data_type = argument.data_type
        if data_type.is_numeric and not data_type.is_floating_point:
            width = data_type.net_code_name(argument)
            if width in self.integer_types:
                return self.integer_types[width]

        rendered = self.render_type(argument)
        if not self.parameter_sizes:
            rendered = rendered.split('(', 1)[0].strip()
        return rendered

    def declare_argument(self, name: str, sql_type: str, direction: str = 'IN') -> str:
        return self.argument_format.format(name=name, type=sql_type, direction=direction)

    def format_literal(self, value, data_type: Optional[DataType] = None) -> str:
        """Format a Python value as a SQL literal for this dialect."""
        if value is None:
            return 'NULL'
        if isinstance(value, bool):
            return self.boolean_literals[0] if value else self.boolean_literals[1]
        if isinstance(value, (int, float, Decimal)):
            return str(value)
        if isinstance(value, (bytes, bytearray)):
            return self.binary_literal_format.format(bytes(value).hex().upper())
        if isinstance(value, (date, datetime)):
            return self._format_date_literal(value, data_type)

        escaped = str(value).replace("'", "''")
        if data_type is not None and data_type.literal_prefix:
            return data_type.format_literal(escaped)
        return f"'{escaped}'"

    def _format_date_literal(self, value, data_type: Optional[DataType]) -> str:
        if data_type is not None and data_type.literal_prefix:
            if not isinstance(value, datetime):
                value = datetime.combine(value, time())
            return data_type.format_literal(value.strftime('%Y-%m-%d %H:%M:%S'))
        if isinstance(value, datetime):
            return f"'{value.strftime('%Y-%m-%d %H:%M:%S')}'"
        return f"'{value.strftime('%Y-%m-%d')}'"

    def list_type_names(self) -> List[str]:
        """Distinct dialect type names in the type table."""
        return sorted({t.type_name for t in self.type_table.values()})


# ---------------------------------------------------------------------------
# SQL Server
# ---------------------------------------------------------------------------

SQLSERVER_TYPES = build_type_table([
    (('varchar', 'varchar2', 'character varying', 'string'), 'VARCHAR({0})', 'string'),
    (('nvarchar', 'nvarchar2', 'national character varying'), 'NVARCHAR({0})', 'string',
     {'literal_prefix': "N'", 'literal_suffix': "'"}),
    (('char', 'character'), 'CHAR({0})', 'string'),
    (('nchar',), 'NCHAR({0})', 'string', {'literal_prefix': "N'", 'literal_suffix': "'"}),
    (('text', 'clob', 'longtext', 'mediumtext', 'tinytext', 'long'), 'VARCHAR(MAX)', 'string'),
    (('ntext', 'nclob'), 'NVARCHAR(MAX)', 'string', {'literal_prefix': "N'", 'literal_suffix': "'"}),
    (('xml', 'xmltype'), 'XML', 'string'),
    (('tinyint',), 'TINYINT', 'int16'),
    (('smallint', 'int2'), 'SMALLINT', 'int16'),
    (('int', 'integer', 'int4', 'mediumint', 'serial'), 'INT', 'int32'),
    (('bigint', 'int8', 'bigserial'), 'BIGINT', 'int64'),
    (('bit', 'boolean', 'bool'), 'BIT', 'bool'),
    (('decimal', 'numeric', 'number'), 'DECIMAL({0},{1})', 'decimal'),
    (('money',), 'MONEY', 'decimal'),
    (('smallmoney',), 'SMALLMONEY', 'decimal'),
    (('float', 'double', 'double precision', 'binary_double', 'float8'), 'FLOAT', 'float64'),
    (('real', 'binary_float', 'float4'), 'REAL', 'float32'),
    (('datetime', 'timestamp', 'timestamp without time zone'), 'DATETIME', 'datetime'),
    (('datetime2',), 'DATETIME2', 'datetime'),
    (('smalldatetime',), 'SMALLDATETIME', 'datetime'),
    (('date',), 'DATE', 'datetime'),
    (('time',), 'TIME', 'datetime'),
    (('datetimeoffset', 'timestamp with time zone'), 'DATETIMEOFFSET', 'datetime'),
    (('uniqueidentifier', 'uuid'), 'UNIQUEIDENTIFIER', 'guid'),
    (('varbinary', 'bytea'), 'VARBINARY({0})', 'binary'),
    (('binary', 'raw'), 'BINARY({0})', 'binary'),
    (('image', 'blob', 'longblob', 'mediumblob', 'long raw'), 'VARBINARY(MAX)', 'binary'),
    (('rowversion',), 'ROWVERSION', 'binary'),
])

SQLSERVER_RESERVED = frozenset("""
ADD ALL ALTER AND ANY AS ASC BACKUP BEGIN BETWEEN BY CASCADE CASE CHECK COLUMN
COMMIT CONSTRAINT CREATE CROSS CURRENT DATABASE DEFAULT DELETE DESC DISTINCT
DROP ELSE END EXEC EXISTS FOREIGN FROM FULL FUNCTION GRANT GROUP HAVING IN INDEX
INNER INSERT INTO IS JOIN KEY LEFT LIKE NOT NULL OF ON OR ORDER OUTER PRIMARY
PROCEDURE PUBLIC REFERENCES RIGHT ROLLBACK SELECT SET TABLE THEN TO TOP
TRANSACTION TRIGGER UNION UNIQUE UPDATE USER VALUES VIEW WHEN WHERE WITH
""".split())

SQLSERVER = DialectProfile(
    sql_type=SqlType.SQLSERVER,
    display_name="SQL Server",
    quote_open='[',
    quote_close=']',
    quote_all=True,
    reserved_words=SQLSERVER_RESERVED,
    supports_schema=True,
    type_table=SQLSERVER_TYPES,
    unbounded_types={
        'VARCHAR': 'VARCHAR(MAX)',
        'NVARCHAR': 'NVARCHAR(MAX)',
        'VARBINARY': 'VARBINARY(MAX)',
    },
    length_limits={
        'VARCHAR': 8000, 'CHAR': 8000, 'NVARCHAR': 4000, 'NCHAR': 4000,
        'VARBINARY': 8000, 'BINARY': 8000,
    },
    integer_types={'short': 'SMALLINT', 'int': 'INT', 'long': 'BIGINT'},
    identity_clause='IDENTITY(1,1)',
    parameter_sigil='@',
    argument_format='{name} {type}',
    procedure_template='sqlserver_procedures.sql.j2',
    binary_literal_format='0x{}',
    identity_insert_format='SET IDENTITY_INSERT {table} {state};',
)


# ---------------------------------------------------------------------------
# Oracle
# ---------------------------------------------------------------------------

_ORACLE_DATE = {'literal_prefix': "TO_DATE('", 'literal_suffix': "','YYYY-MM-DD HH24:MI:SS')"}
_ORACLE_TIMESTAMP = {'literal_prefix': "TO_TIMESTAMP('", 'literal_suffix': "','YYYY-MM-DD HH24:MI:SS')"}

ORACLE_TYPES = build_type_table([
    (('varchar2', 'varchar', 'character varying', 'string'), 'VARCHAR2({0})', 'string'),
    (('nvarchar2', 'nvarchar', 'national character varying'), 'NVARCHAR2({0})', 'string',
     {'literal_prefix': "N'", 'literal_suffix': "'"}),
    (('char', 'character'), 'CHAR({0})', 'string'),
    (('nchar',), 'NCHAR({0})', 'string', {'literal_prefix': "N'", 'literal_suffix': "'"}),
    (('clob', 'text', 'longtext', 'mediumtext', 'tinytext', 'long'), 'CLOB', 'string'),
    (('nclob', 'ntext'), 'NCLOB', 'string'),
    (('xmltype', 'xml'), 'XMLTYPE', 'string'),
    (('tinyint',), 'NUMBER(3)', 'int16'),
    (('smallint', 'int2'), 'NUMBER(5)', 'int16'),
    (('int', 'integer', 'int4', 'mediumint', 'serial'), 'NUMBER(10)', 'int32'),
    (('bigint', 'int8', 'bigserial'), 'NUMBER(19)', 'int64'),
    (('bit', 'boolean', 'bool'), 'NUMBER(1)', 'bool'),
    (('number', 'decimal', 'numeric'), 'NUMBER({0},{1})', 'decimal'),
    (('money',), 'NUMBER(19,4)', 'decimal'),
    (('smallmoney',), 'NUMBER(10,4)', 'decimal'),
    (('binary_double', 'float', 'double', 'double precision', 'float8'), 'BINARY_DOUBLE', 'float64'),
    (('binary_float', 'real', 'float4'), 'BINARY_FLOAT', 'float32'),
    (('date', 'datetime', 'smalldatetime', 'time'), 'DATE', 'datetime', _ORACLE_DATE),
    (('timestamp', 'datetime2', 'timestamp without time zone'), 'TIMESTAMP', 'datetime', _ORACLE_TIMESTAMP),
    (('timestamp with time zone', 'datetimeoffset'), 'TIMESTAMP WITH TIME ZONE', 'datetime'),
    (('uniqueidentifier', 'uuid'), 'RAW(16)', 'guid'),
    (('raw', 'varbinary', 'binary'), 'RAW({0})', 'binary'),
    (('blob', 'image', 'bytea', 'longblob', 'mediumblob', 'long raw'), 'BLOB', 'binary'),
])

ORACLE_RESERVED = frozenset("""
ACCESS ADD ALL ALTER AND ANY AS ASC AUDIT BETWEEN BY CHAR CHECK CLUSTER COLUMN
COMMENT COMPRESS CONNECT CREATE CURRENT DATE DECIMAL DEFAULT DELETE DESC DISTINCT
DROP ELSE EXCLUSIVE EXISTS FILE FLOAT FOR FROM GRANT GROUP HAVING IDENTIFIED
IMMEDIATE IN INCREMENT INDEX INITIAL INSERT INTEGER INTERSECT INTO IS LEVEL LIKE
LOCK LONG MAXEXTENTS MINUS MODE MODIFY NOAUDIT NOCOMPRESS NOT NOWAIT NULL NUMBER
OF OFFLINE ON ONLINE OPTION OR ORDER PCTFREE PRIOR PUBLIC RAW RENAME RESOURCE
REVOKE ROW ROWID ROWNUM ROWS SELECT SESSION SET SHARE SIZE SMALLINT START
SUCCESSFUL SYNONYM SYSDATE TABLE THEN TO TRIGGER UID UNION UNIQUE UPDATE USER
VALIDATE VALUES VARCHAR VARCHAR2 VIEW WHENEVER WHERE WITH
""".split())

ORACLE = DialectProfile(
    sql_type=SqlType.ORACLE,
    display_name="Oracle",
    quote_open='"',
    quote_close='"',
    quote_all=True,
    reserved_words=ORACLE_RESERVED,
    supports_schema=True,
    type_table=ORACLE_TYPES,
    unbounded_types={
        'VARCHAR2': 'CLOB',
        'NVARCHAR2': 'NCLOB',
        'RAW': 'BLOB',
    },
    length_limits={
        'VARCHAR2': 4000, 'CHAR': 2000, 'NVARCHAR2': 2000, 'NCHAR': 1000, 'RAW': 2000,
    },
    integer_types={'short': 'SMALLINT', 'int': 'INTEGER', 'long': 'NUMBER'},
    identity_clause='GENERATED BY DEFAULT AS IDENTITY',
    uses_packages=True,
    uses_cursor_parameter=True,
    cursor_type='SYS_REFCURSOR',
    cursor_parameter_name='cursor',
    parameter_sizes=False,
    argument_format='{name} {direction} {type}',
    qualify_parameters=True,
    procedure_template='oracle_procedures.sql.j2',
    binary_literal_format="HEXTORAW('{}')",
)


# ---------------------------------------------------------------------------
# MySQL
# ---------------------------------------------------------------------------

MYSQL_TYPES = build_type_table([
    (('varchar', 'nvarchar', 'varchar2', 'nvarchar2', 'character varying', 'string'), 'VARCHAR({0})', 'string'),
    (('char', 'nchar', 'character'), 'CHAR({0})', 'string'),
    (('text', 'ntext', 'clob', 'nclob', 'long'), 'TEXT', 'string'),
    (('mediumtext',), 'MEDIUMTEXT', 'string'),
    (('longtext',), 'LONGTEXT', 'string'),
    (('tinytext',), 'TINYTEXT', 'string'),
    (('xml', 'xmltype'), 'LONGTEXT', 'string'),
    (('tinyint',), 'TINYINT', 'int16'),
    (('smallint', 'int2'), 'SMALLINT', 'int16'),
    (('mediumint',), 'MEDIUMINT', 'int32'),
    (('int', 'integer', 'int4', 'serial'), 'INT', 'int32'),
    (('bigint', 'int8', 'bigserial'), 'BIGINT', 'int64'),
    (('bit', 'boolean', 'bool'), 'TINYINT(1)', 'bool'),
    (('decimal', 'numeric', 'number'), 'DECIMAL({0},{1})', 'decimal'),
    (('money',), 'DECIMAL(19,4)', 'decimal'),
    (('smallmoney',), 'DECIMAL(10,4)', 'decimal'),
    (('double', 'float', 'double precision', 'binary_double', 'float8'), 'DOUBLE', 'float64'),
    (('real', 'binary_float', 'float4'), 'FLOAT', 'float32'),
    (('datetime', 'datetime2', 'smalldatetime', 'timestamp without time zone'), 'DATETIME', 'datetime'),
    (('timestamp', 'datetimeoffset', 'timestamp with time zone'), 'TIMESTAMP', 'datetime'),
    (('date',), 'DATE', 'datetime'),
    (('time',), 'TIME', 'datetime'),
    (('uniqueidentifier', 'uuid'), 'CHAR(36)', 'guid'),
    (('varbinary', 'raw', 'bytea'), 'VARBINARY({0})', 'binary'),
    (('binary',), 'BINARY({0})', 'binary'),
    (('blob', 'image', 'long raw'), 'BLOB', 'binary'),
    (('longblob',), 'LONGBLOB', 'binary'),
    (('mediumblob',), 'MEDIUMBLOB', 'binary'),
])

MYSQL = DialectProfile(
    sql_type=SqlType.MYSQL,
    display_name="MySQL",
    quote_open='`',
    quote_close='`',
    quote_all=True,
    supports_schema=True,
    type_table=MYSQL_TYPES,
    unbounded_types={
        'VARCHAR': 'LONGTEXT',
        'VARBINARY': 'LONGBLOB',
    },
    length_limits={'VARCHAR': 16383, 'CHAR': 255, 'BINARY': 255, 'VARBINARY': 65535},
    integer_types={'short': 'SMALLINT', 'int': 'INT', 'long': 'BIGINT'},
    identity_clause='AUTO_INCREMENT',
    argument_format='{direction} {name} {type}',
    qualify_columns=True,
    qualify_set_targets=True,
    procedure_template='mysql_procedures.sql.j2',
)


# ---------------------------------------------------------------------------
# SQLite
# ---------------------------------------------------------------------------

SQLITE_TYPES = build_type_table([
    (('text', 'varchar', 'nvarchar', 'varchar2', 'nvarchar2', 'char', 'nchar', 'character',
      'character varying', 'clob', 'nclob', 'ntext', 'longtext', 'mediumtext', 'tinytext',
      'long', 'xml', 'xmltype', 'string'), 'TEXT', 'string'),
    (('integer', 'int', 'int2', 'int4', 'int8', 'tinyint', 'smallint', 'mediumint', 'bigint',
      'serial', 'bigserial'), 'INTEGER', 'int64'),
    (('bit', 'boolean', 'bool'), 'BOOLEAN', 'bool'),
    (('numeric', 'decimal', 'number', 'money', 'smallmoney'), 'NUMERIC', 'decimal'),
    (('real', 'float', 'double', 'double precision', 'binary_double', 'binary_float',
      'float4', 'float8'), 'REAL', 'float64'),
    (('datetime', 'datetime2', 'smalldatetime', 'date', 'time', 'timestamp', 'datetimeoffset',
      'timestamp with time zone', 'timestamp without time zone'), 'DATETIME', 'datetime'),
    (('uniqueidentifier', 'uuid'), 'TEXT', 'guid'),
    (('blob', 'varbinary', 'binary', 'image', 'raw', 'long raw', 'bytea', 'longblob',
      'mediumblob'), 'BLOB', 'binary'),
])

SQLITE_RESERVED = frozenset("""
ABORT ACTION ADD AFTER ALL ALTER ANALYZE AND AS ASC ATTACH AUTOINCREMENT BEFORE
BEGIN BETWEEN BY CASCADE CASE CAST CHECK COLLATE COLUMN COMMIT CONFLICT
CONSTRAINT CREATE CROSS CURRENT_DATE CURRENT_TIME CURRENT_TIMESTAMP DATABASE
DEFAULT DEFERRABLE DEFERRED DELETE DESC DETACH DISTINCT DROP EACH ELSE END
ESCAPE EXCEPT EXCLUSIVE EXISTS EXPLAIN FAIL FOR FOREIGN FROM FULL GLOB GROUP
HAVING IF IGNORE IMMEDIATE IN INDEX INDEXED INITIALLY INNER INSERT INSTEAD
INTERSECT INTO IS ISNULL JOIN KEY LEFT LIKE LIMIT MATCH NATURAL NO NOT NOTNULL
NULL OF OFFSET ON OR ORDER OUTER PLAN PRAGMA PRIMARY QUERY RAISE RECURSIVE
REFERENCES REGEXP REINDEX RELEASE RENAME REPLACE RESTRICT RIGHT ROLLBACK ROW
SAVEPOINT SELECT SET TABLE TEMP TEMPORARY THEN TO TRANSACTION TRIGGER UNION
UNIQUE UPDATE USING VACUUM VALUES VIEW VIRTUAL WHEN WHERE WITH WITHOUT
""".split())

SQLITE = DialectProfile(
    sql_type=SqlType.SQLITE,
    display_name="SQLite",
    quote_open='"',
    quote_close='"',
    quote_all=False,
    reserved_words=SQLITE_RESERVED,
    supports_schema=False,
    type_table=SQLITE_TYPES,
    integer_types={'short': 'INTEGER', 'int': 'INTEGER', 'long': 'INTEGER'},
    supports_alter_constraint=False,
    supports_procedures=False,
)


# ---------------------------------------------------------------------------
# PostgreSQL
# ---------------------------------------------------------------------------

POSTGRESQL_TYPES = build_type_table([
    (('varchar', 'character varying', 'nvarchar', 'varchar2', 'nvarchar2', 'string'), 'VARCHAR({0})', 'string'),
    (('char', 'nchar', 'character'), 'CHAR({0})', 'string'),
    (('text', 'ntext', 'clob', 'nclob', 'longtext', 'mediumtext', 'tinytext', 'long'), 'TEXT', 'string'),
    (('xml', 'xmltype'), 'XML', 'string'),
    (('smallint', 'int2', 'tinyint'), 'SMALLINT', 'int16'),
    (('integer', 'int', 'int4', 'mediumint', 'serial'), 'INTEGER', 'int32'),
    (('bigint', 'int8', 'bigserial'), 'BIGINT', 'int64'),
    (('boolean', 'bool', 'bit'), 'BOOLEAN', 'bool'),
    (('numeric', 'decimal', 'number'), 'NUMERIC({0},{1})', 'decimal'),
    (('money',), 'NUMERIC(19,4)', 'decimal'),
    (('smallmoney',), 'NUMERIC(10,4)', 'decimal'),
    (('double precision', 'float8', 'float', 'double', 'binary_double'), 'DOUBLE PRECISION', 'float64'),
    (('real', 'float4', 'binary_float'), 'REAL', 'float32'),
    (('timestamp', 'timestamp without time zone', 'datetime', 'datetime2', 'smalldatetime'), 'TIMESTAMP', 'datetime'),
    (('timestamp with time zone', 'datetimeoffset'), 'TIMESTAMP WITH TIME ZONE', 'datetime'),
    (('date',), 'DATE', 'datetime'),
    (('time',), 'TIME', 'datetime'),
    (('uuid', 'uniqueidentifier'), 'UUID', 'guid'),
    (('bytea', 'blob', 'varbinary', 'binary', 'image', 'raw', 'long raw', 'longblob', 'mediumblob'), 'BYTEA', 'binary'),
])

POSTGRESQL = DialectProfile(
    sql_type=SqlType.POSTGRESQL,
    display_name="PostgreSQL",
    quote_open='"',
    quote_close='"',
    quote_all=True,
    supports_schema=True,
    type_table=POSTGRESQL_TYPES,
    unbounded_types={'VARCHAR': 'TEXT'},
    integer_types={'short': 'SMALLINT', 'int': 'INTEGER', 'long': 'BIGINT'},
    identity_clause='GENERATED BY DEFAULT AS IDENTITY',
    parameter_sizes=False,
    argument_format='{direction} {name} {type}',
    qualify_columns=True,
    qualify_parameters=True,
    procedure_template='postgresql_procedures.sql.j2',
    boolean_literals=('TRUE', 'FALSE'),
    binary_literal_format="'\\x{}'::bytea",
)


BUILTIN_PROFILES = (SQLSERVER, ORACLE, MYSQL, SQLITE, POSTGRESQL)
