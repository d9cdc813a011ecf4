"""
Dialect Registry and Generator Factory

Manages registration and retrieval of dialect profiles, and builds
dialect-bound generators from a dialect selector.
"""

import logging
from typing import Dict, List, Optional, Union

from ..exceptions import UnsupportedDialectError
from ..schema.model import DatabaseSchema, DatabaseTable
from .config import GeneratorConfig, SqlType
from .dialects import BUILTIN_PROFILES, DialectProfile
from .inserts import InsertGenerator
from .procedures import ProcedureGenerator
from .tables import AllTablesGenerator, TableGenerator

logger = logging.getLogger(__name__)

DialectKey = Union[SqlType, str]


def _key(sql_type: DialectKey) -> str:
    if isinstance(sql_type, SqlType):
        return sql_type.value
    return str(sql_type).strip().lower()


class DialectRegistry:
    """
    Registry for dialect profiles.

    Built-in dialects register lazily on first lookup; custom profiles can
    be added or replaced with register().
    """

    _instance: Optional['DialectRegistry'] = None
    _profiles: Dict[str, DialectProfile] = {}
    _initialized: bool = False
    _builtins_registered: bool = False

    def __new__(cls) -> 'DialectRegistry':
        """Singleton pattern."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if not self._initialized:
            self._profiles = {}
            self._builtins_registered = False
            self._initialized = True

    def register(self, profile: DialectProfile, override: bool = False) -> None:
        """
        Register a dialect profile under its sql_type.

        Args:
            profile: The dialect rules
            override: If True, replace an existing registration

        Raises:
            ValueError: If the dialect is already registered and override=False
            TypeError: If profile is not a DialectProfile
        """
        if not isinstance(profile, DialectProfile):
            raise TypeError(f"Expected DialectProfile, got {type(profile).__name__}")

        key = _key(profile.sql_type)
        if key in self._profiles and not override:
            raise ValueError(
                f"Dialect '{key}' already registered. "
                f"Use override=True to replace."
            )

        self._profiles[key] = profile
        logger.debug(f"Registered dialect: {key} -> {profile.display_name}")

    def get(self, sql_type: DialectKey) -> DialectProfile:
        """
        Get the profile for a dialect.

        Args:
            sql_type: SqlType member or its name ('oracle', 'SqlServer', ...)

        Raises:
            UnsupportedDialectError: If the dialect is not registered
        """
        self._ensure_builtins_registered()

        key = _key(sql_type)
        if key not in self._profiles:
            available = ', '.join(self.list_dialects())
            raise UnsupportedDialectError(
                f"Dialect '{sql_type}' not supported. "
                f"Available dialects: {available}"
            )
        return self._profiles[key]

    def list_dialects(self) -> List[str]:
        self._ensure_builtins_registered()
        return list(self._profiles.keys())

    def get_dialect_info(self, sql_type: DialectKey) -> Dict[str, object]:
        """
        Get information about a dialect.

        Returns:
            Dict with dialect capabilities and type names
        """
        profile = self.get(sql_type)
        return {
            'name': _key(profile.sql_type),
            'display_name': profile.display_name,
            'supports_schema': profile.supports_schema,
            'supports_procedures': profile.supports_procedures,
            'uses_packages': profile.uses_packages,
            'types': profile.list_type_names(),
        }

    def unregister(self, sql_type: DialectKey) -> bool:
        """
        Unregister a dialect.

        Returns:
            True if unregistered, False if not found
        """
        key = _key(sql_type)
        if key in self._profiles:
            del self._profiles[key]
            logger.debug(f"Unregistered dialect: {key}")
            return True
        return False

    def _ensure_builtins_registered(self) -> None:
        if not self._builtins_registered:
            self._register_builtins()
            self._builtins_registered = True

    def _register_builtins(self) -> None:
        for profile in BUILTIN_PROFILES:
            if _key(profile.sql_type) not in self._profiles:
                self.register(profile)

    def clear(self) -> None:
        """Clear all registrations (mainly for testing)."""
        self._profiles.clear()
        self._builtins_registered = False


# Module-level singleton instance
_registry = DialectRegistry()


def get_dialect_profile(sql_type: DialectKey) -> DialectProfile:
    """
    Get a dialect profile by SqlType or name.

    Example:
        >>> get_dialect_profile('oracle').quote_identifier('Categories')
        '"Categories"'
    """
    return _registry.get(sql_type)


def register_dialect(profile: DialectProfile, override: bool = False) -> None:
    """Register a custom dialect profile."""
    _registry.register(profile, override)


def list_available_dialects() -> List[str]:
    """
    List all available dialect names.

    Example:
        >>> list_available_dialects()
        ['sqlserver', 'oracle', 'mysql', 'sqlite', 'postgresql']
    """
    return _registry.list_dialects()


class DdlGeneratorFactory:
    """
    Builds generators bound to one dialect.

    Every generator gets a copy of the factory's configuration; changing a
    generator's attributes afterwards does not affect its siblings.
    """

    def __init__(self, sql_type: DialectKey, config: Optional[GeneratorConfig] = None):
        """
        Args:
            sql_type: Target dialect
            config: Generator configuration (defaults from config.yaml)

        Raises:
            UnsupportedDialectError: If the dialect is not registered
        """
        self.profile = get_dialect_profile(sql_type)
        self.sql_type = self.profile.sql_type
        self.config = config or GeneratorConfig.from_config()

    def table_generator(self, table: DatabaseTable, schema: Optional[DatabaseSchema] = None) -> TableGenerator:
        return TableGenerator(self.profile, table, self.config, schema=schema)

    def all_tables_generator(self, schema: DatabaseSchema) -> AllTablesGenerator:
        return AllTablesGenerator(self.profile, schema, self.config)

    def procedure_generator(self, table: DatabaseTable) -> ProcedureGenerator:
        """
        Raises:
            UnsupportedDialectError: If the dialect has no stored procedures
        """
        return ProcedureGenerator(self.profile, table, self.config)

    def insert_generator(self, table: DatabaseTable, rows=None) -> InsertGenerator:
        return InsertGenerator(self.profile, table, self.config, rows=rows)

    def __repr__(self) -> str:
        return f"DdlGeneratorFactory({_key(self.sql_type)})"
