"""Resolver configuration.

ResolverConfig is a frozen dataclass — immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

import os
from dataclasses import dataclass

from nsloader.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class ResolverConfig:
    """Resolver configuration. Immutable after creation.

    All fields have sensible defaults for Python plugins. Override what
    you need::

        config = ResolverConfig(delimiter="\\\\", extension=".php")
    """

    # Namespaces
    delimiter: str = "."

    # Filesystem
    separator: str = "/"
    strip_separators: str = "/" + os.sep  # Trimmed from the right of base dirs
    extension: str = ".py"

    def __post_init__(self) -> None:
        if not self.delimiter:
            msg = "ResolverConfig.delimiter must not be empty"
            raise ConfigurationError(msg)
        if not self.separator:
            msg = "ResolverConfig.separator must not be empty"
            raise ConfigurationError(msg)

    @property
    def suffix(self) -> str:
        """The file extension with exactly one leading dot."""
        if not self.extension:
            return ""
        return "." + self.extension.lstrip(".")
