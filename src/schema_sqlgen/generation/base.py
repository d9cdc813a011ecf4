"""
Base Script Generator Interface

Defines the interface shared by all script generators (tables, procedures,
inserts). Each generator is bound to one dialect profile and carries its
own configuration, so independent generators can run side by side.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable, Optional, Union

from .config import GeneratorConfig
from .dialects import DialectProfile
from .writer import ScriptWriter

logger = logging.getLogger(__name__)


class BaseScriptGenerator(ABC):
    """
    Abstract base class for dialect-bound SQL script generators.

    Configuration (include_schema, manual_prefix, format_parameter,
    cursor_parameter_name) is plain attributes, set before write().
    """

    def __init__(self, profile: DialectProfile, config: Optional[GeneratorConfig] = None):
        """
        Initialize the generator.

        Args:
            profile: Dialect rules to render with
            config: Optional initial configuration
        """
        config = config or GeneratorConfig.from_config()
        self.profile = profile
        self.include_schema: bool = config.include_schema
        self.manual_prefix: str = config.manual_prefix
        self.format_parameter: Callable[[str], str] = config.format_parameter
        self._cursor_parameter_name: Optional[str] = config.cursor_parameter_name
        self.encoding: str = config.encoding

    @property
    def cursor_parameter_name(self) -> str:
        """Output cursor argument name (dialect default when unset)."""
        return self._cursor_parameter_name or self.profile.cursor_parameter_name

    @cursor_parameter_name.setter
    def cursor_parameter_name(self, value: Optional[str]) -> None:
        self._cursor_parameter_name = value

    @abstractmethod
    def write(self) -> str:
        """
        Render the script.

        Returns:
            Complete SQL text

        Raises:
            UnknownTypeError: If a type has no rule in the dialect
        """
        pass

    def write_to_script(self, path: Union[str, Path]) -> str:
        """
        Render and write the script to a file.

        Rendering happens before the file is opened, so a rendering error
        leaves no partial file behind.

        Returns:
            The rendered text

        Raises:
            UnknownTypeError: If rendering fails
            ScriptWriteError: If the file cannot be written
        """
        try:
            text = self.write()
        except Exception as e:
            logger.error(f"{self!r} failed to render {path}: {e}")
            raise
        with ScriptWriter(path, encoding=self.encoding) as writer:
            writer.write(text)
        return text

    def qualified_name(self, name: str, schema: Optional[str]) -> str:
        """Quoted object name, schema-qualified iff include_schema."""
        return self.profile.qualify(name, schema, self.include_schema)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(dialect={self.profile.display_name})"
