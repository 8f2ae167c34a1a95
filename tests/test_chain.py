"""Tests for nsloader.chain — ordered resolver composition."""

from nsloader.chain import ResolutionChain
from nsloader.types import Resolution, Resolver


class StaticResolver:
    def __init__(self, answers: dict[str, str]) -> None:
        self.answers = answers
        self.calls: list[str] = []

    def resolve(self, identifier: str) -> Resolution:
        self.calls.append(identifier)
        path = self.answers.get(identifier)
        if path is None:
            return Resolution()
        return Resolution(path, True)


class TestResolutionChain:
    def test_empty_chain_finds_nothing(self) -> None:
        assert ResolutionChain().resolve("App.User") == Resolution("", False)

    def test_first_success_wins(self) -> None:
        first = StaticResolver({"App.User": "/a/User.py"})
        second = StaticResolver({"App.User": "/b/User.py"})
        chain = ResolutionChain([first, second])

        assert chain.resolve("App.User").path == "/a/User.py"
        assert second.calls == []

    def test_consults_in_order_until_found(self) -> None:
        first = StaticResolver({})
        second = StaticResolver({"App.User": "/b/User.py"})
        chain = ResolutionChain()
        chain.add(first)
        chain.add(second)

        assert chain.resolve("App.User") == Resolution("/b/User.py", True)
        assert first.calls == ["App.User"]
        assert second.calls == ["App.User"]

    def test_nobody_finds_it(self) -> None:
        chain = ResolutionChain([StaticResolver({}), StaticResolver({})])
        assert not chain.resolve("App.User")

    def test_len_and_iter(self) -> None:
        a, b = StaticResolver({}), StaticResolver({})
        chain = ResolutionChain([a])
        chain.add(b)

        assert len(chain) == 2
        assert list(chain) == [a, b]

    def test_resolvers_satisfy_protocol(self) -> None:
        from nsloader.resolver import PrefixResolver

        assert isinstance(StaticResolver({}), Resolver)
        assert isinstance(PrefixResolver(), Resolver)
