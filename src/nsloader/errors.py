"""nsloader exception hierarchy.

Failing to find a file is not an error: resolvers report it as a
``Resolution`` with ``found=False``. These types cover misconfiguration
and files that were located but could not be executed.
"""

from dataclasses import dataclass


class NsloaderError(Exception):
    """Base for all nsloader-specific errors."""


class ConfigurationError(NsloaderError):
    """Raised when resolver configuration is invalid.

    Typically raised from ``ResolverConfig`` at construction time.
    """


@dataclass(frozen=True, slots=True)
class LoadError(NsloaderError):
    """A located file raised while being loaded.

    Carries the identifier being resolved and the path that was executed.
    The original exception is chained as ``__cause__``.
    """

    identifier: str
    path: str
    detail: str = ""

    def __str__(self) -> str:
        if self.detail:
            return f"{self.identifier} ({self.path}): {self.detail}"
        return f"{self.identifier} ({self.path})"
