"""
Generator Configuration

Dialect tags and the per-run options shared by all script generators.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Optional

from ..config import get_config


class SqlType(Enum):
    """Supported SQL dialects."""
    SQLSERVER = "sqlserver"
    ORACLE = "oracle"
    MYSQL = "mysql"
    SQLITE = "sqlite"
    POSTGRESQL = "postgresql"


def identity(name: str) -> str:
    """Default parameter formatter: leaves the name unchanged."""
    return name


@dataclass
class GeneratorConfig:
    """
    Options applied to a generator before rendering.

    include_schema: prefix object names with the owning schema
    manual_prefix: prepended to generated procedure names
    format_parameter: column name -> parameter name hook
    cursor_parameter_name: output cursor argument (None = dialect default)
    """
    include_schema: bool = True
    manual_prefix: str = ""
    format_parameter: Callable[[str], str] = field(default=identity)
    cursor_parameter_name: Optional[str] = None
    encoding: str = "utf-8"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'GeneratorConfig':
        """Create config from dictionary."""
        return cls(
            include_schema=data.get('include_schema', True),
            manual_prefix=data.get('manual_prefix') or "",
            format_parameter=data.get('format_parameter') or identity,
            cursor_parameter_name=data.get('cursor_parameter_name'),
            encoding=data.get('encoding', 'utf-8'),
        )

    @classmethod
    def from_config(cls) -> 'GeneratorConfig':
        """Create config from the loaded config.yaml settings."""
        config = get_config()
        data = dict(config.generation)
        data['encoding'] = config.get('output', 'encoding', default='utf-8')
        return cls.from_dict(data)
