"""
Semantic Data Types

Maps database-native data types onto portable (host-language) types.
Classification is resolved through a static table of portable type
identifiers, so an unknown hint is simply "not found" rather than an error.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PortableType:
    """Classification flags for one portable type family."""
    name: str
    cs_name: str
    is_string: bool = False
    is_int: bool = False
    is_float: bool = False
    is_date_time: bool = False
    is_numeric: bool = False


# Closed set of portable type identifiers
PORTABLE_TYPES: Dict[str, PortableType] = {
    'string': PortableType('string', 'string', is_string=True),
    'int16': PortableType('int16', 'short', is_numeric=True),
    'int32': PortableType('int32', 'int', is_int=True, is_numeric=True),
    'int64': PortableType('int64', 'long', is_numeric=True),
    'float32': PortableType('float32', 'float', is_float=True, is_numeric=True),
    'float64': PortableType('float64', 'double', is_numeric=True),
    'decimal': PortableType('decimal', 'decimal', is_numeric=True),
    'datetime': PortableType('datetime', 'DateTime', is_date_time=True),
    'bool': PortableType('bool', 'bool'),
}

# Host-style spellings accepted for the identifiers above
PORTABLE_ALIASES: Dict[str, str] = {
    'str': 'string',
    'short': 'int16',
    'smallint': 'int16',
    'int': 'int32',
    'integer': 'int32',
    'long': 'int64',
    'bigint': 'int64',
    'single': 'float32',
    'float': 'float32',
    'double': 'float64',
    'numeric': 'decimal',
    'date': 'datetime',
    'boolean': 'bool',
}

# Secondary display names, checked after string/int/float/datetime
SECONDARY_CS_NAMES: Dict[str, str] = {
    'bool': 'bool',
    'int16': 'short',
    'int64': 'long',
    'decimal': 'decimal',
    'float64': 'double',
}


def normalize_portable_hint(hint: Optional[str]) -> Optional[str]:
    """
    Normalize a portable type hint to one of the PORTABLE_TYPES keys.

    Accepts "int32", "Int32", "System.Int32" and the aliases above.
    Returns None for an empty or unrecognized hint.
    """
    if not hint:
        return None
    key = hint.strip().lower()
    if key.startswith('system.'):
        key = key[len('system.'):]
    key = PORTABLE_ALIASES.get(key, key)
    return key if key in PORTABLE_TYPES else None


@dataclass
class DataType:
    """
    A database-native data type and its portable meaning.

    The portable type is resolved once in __post_init__; the classification
    flags are read-only properties over it. Only the display name can be
    overridden, through the net_data_type_cs_name setter.
    """
    type_name: str
    net_data_type: Optional[str] = None
    provider_db_type: int = 0
    create_format: Optional[str] = None
    literal_prefix: Optional[str] = None
    literal_suffix: Optional[str] = None

    _portable: Optional[PortableType] = field(init=False, default=None, repr=False, compare=False)
    _cs_name_override: Optional[str] = field(init=False, default=None, repr=False, compare=False)

    def __post_init__(self):
        key = normalize_portable_hint(self.net_data_type)
        if key is None:
            if self.net_data_type:
                logger.debug(f"Unrecognized portable type '{self.net_data_type}' for {self.type_name}")
            return
        self._portable = PORTABLE_TYPES[key]

    @property
    def is_string(self) -> bool:
        return self._portable is not None and self._portable.is_string

    @property
    def is_int(self) -> bool:
        return self._portable is not None and self._portable.is_int

    @property
    def is_float(self) -> bool:
        return self._portable is not None and self._portable.is_float

    @property
    def is_date_time(self) -> bool:
        return self._portable is not None and self._portable.is_date_time

    @property
    def is_numeric(self) -> bool:
        return self._portable is not None and self._portable.is_numeric

    @property
    def is_floating_point(self) -> bool:
        """float32 or float64: numeric but never narrowed to an integer."""
        return self.portable_type in ('float32', 'float64')

    @property
    def is_string_clob(self) -> bool:
        """(n)text or clob"""
        name = (self.type_name or '').lower()
        return self.is_string and (name.endswith('text') or name == 'clob')

    @property
    def portable_type(self) -> Optional[str]:
        """The normalized portable identifier, or None if unknown."""
        return self._portable.name if self._portable else None

    @property
    def net_data_type_cs_name(self) -> Optional[str]:
        """
        Display name of the portable type.

        Order: explicit override, string, int, float, DateTime,
        then bool/short/long/decimal/double, else the raw hint.
        """
        if self._cs_name_override:
            return self._cs_name_override
        if not self.net_data_type:
            return None
        if self.is_string:
            return 'string'
        if self.is_int:
            return 'int'
        if self.is_float:
            return 'float'
        if self.is_date_time:
            return 'DateTime'
        if self._portable and self._portable.name in SECONDARY_CS_NAMES:
            return SECONDARY_CS_NAMES[self._portable.name]
        return self.net_data_type

    @net_data_type_cs_name.setter
    def net_data_type_cs_name(self, value: Optional[str]) -> None:
        self._cs_name_override = value

    def net_code_name(self, descriptor) -> Optional[str]:
        """
        Display name corrected for the precision/scale of a column or argument.

        Args:
            descriptor: Anything with `precision` and `scale` attributes
                (DatabaseColumn, DatabaseArgument)

        Returns:
            Narrowest safe integer name, or the display name
        """
        return resolve_numeric_width(
            self,
            getattr(descriptor, 'precision', None),
            getattr(descriptor, 'scale', None),
        )

    def placeholder_count(self) -> int:
        """Number of positional holders in create_format ({0}, {1})."""
        if not self.create_format:
            return 0
        if '{1}' in self.create_format:
            return 2
        if '{0}' in self.create_format:
            return 1
        return 0

    def bare_name(self) -> str:
        """create_format (or type name) without the parenthesised holders."""
        text = self.create_format or self.type_name
        return text.split('(', 1)[0].strip()

    def format_create(
        self,
        length: Optional[int] = None,
        precision: Optional[int] = None,
        scale: Optional[int] = None,
    ) -> Optional[str]:
        """
        Fill create_format with the given sizes.

        Numeric types take (precision, scale); all others take length.
        Returns None when the format needs a value that is missing, so the
        caller can choose the dialect's unbounded form.
        """
        if not self.create_format:
            return None

        holders = self.placeholder_count()
        if holders == 0:
            return self.create_format

        if self.is_numeric:
            if precision is None or precision <= 0:
                return None
            if holders == 2:
                return self.create_format.format(precision, scale or 0)
            return self.create_format.format(precision)

        if length is None or length <= 0:
            return None
        if holders == 2:
            return self.create_format.format(length, scale or 0)
        return self.create_format.format(length)

    def format_literal(self, text: str) -> str:
        """Wrap literal text with the type's prefix and suffix."""
        return f"{self.literal_prefix or ''}{text}{self.literal_suffix or ''}"

    def __str__(self) -> str:
        return f"{self.type_name} = {self.net_data_type}"


def classify(native_name: str, portable_hint: Optional[str], **kwargs) -> DataType:
    """Build a DataType for a native type name and portable hint."""
    return DataType(native_name, portable_hint, **kwargs)


def resolve_numeric_width(
    data_type: DataType,
    precision: Optional[int],
    scale: Optional[int],
) -> Optional[str]:
    """
    Pick the narrowest safe integer name for a fixed-point type.

    Engines without a native integer type (Oracle NUMBER) store integers
    as scale-0 decimals. The declared precision tells us which host
    integer can hold the value.

    Args:
        data_type: The semantic type
        precision: Total digits (None counts as 0)
        scale: Digits after the decimal point (None counts as 0)

    Returns:
        "short", "int", "long", or the type's display name unchanged
    """
    if not data_type.is_numeric or data_type.is_int:
        return data_type.net_data_type_cs_name

    precision = precision or 0
    scale = scale or 0
    if scale != 0 or precision >= 19:
        return data_type.net_data_type_cs_name

    # NUMBER(10) can exceed int.MaxValue (2147483647) but 10 digits is
    # accepted as int: the database allows one digit of slack
    if precision > 10:
        return 'long'
    if precision > 4:
        return 'int'
    if precision > 1:
        return 'short'
    return data_type.net_data_type_cs_name
