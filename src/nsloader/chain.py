"""Resolution chain — ordered composition of resolvers.

The embedding application owns the chain and decides which resolvers
take part, in which order. Nothing is registered globally::

    chain = ResolutionChain()
    plugin_resolver.install(chain)
    vendor_resolver.install(chain)

    path, found = chain.resolve("Plugin.Models.User")
"""

import logging
from collections.abc import Iterator

from nsloader.types import NOT_FOUND, Resolution, Resolver

logger = logging.getLogger("nsloader.chain")


class ResolutionChain:
    """Consults resolvers in the order they were added until one succeeds."""

    __slots__ = ("_resolvers",)

    def __init__(self, resolvers: list[Resolver] | None = None) -> None:
        self._resolvers: list[Resolver] = list(resolvers or ())

    def add(self, resolver: Resolver) -> None:
        self._resolvers.append(resolver)

    def resolve(self, identifier: str) -> Resolution:
        for resolver in self._resolvers:
            result = resolver.resolve(identifier)
            if result.found:
                return result
        logger.debug("No resolver in chain found %s", identifier)
        return NOT_FOUND

    def __iter__(self) -> Iterator[Resolver]:
        return iter(self._resolvers)

    def __len__(self) -> int:
        return len(self._resolvers)
