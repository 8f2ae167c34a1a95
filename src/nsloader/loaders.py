"""Pluggable file loaders.

A resolver only locates files. What "loading" a located file means is
decided by the ``FileLoader`` it was built with:

- ``ModuleFileLoader`` executes the file as a Python module (default)
- ``PathLoader`` loads nothing, accepting any regular file
- ``TextLoader`` reads the file's source text
- ``TemplateLoader`` compiles the file as a kida template

Every loader returns ``False`` for files it cannot read, so the resolver
moves on to its next candidate.
"""

import importlib.machinery
import importlib.util
import logging
import os
import sys
from types import ModuleType
from typing import Any

from kida import Environment

from nsloader.errors import LoadError

logger = logging.getLogger("nsloader.loaders")


class ModuleFileLoader:
    """Execute located files as Python modules.

    The module is registered in ``sys.modules`` under the identifier with
    its namespace delimiters replaced by dots, so ``Plugin\\Models\\User``
    becomes ``Plugin.Models.User``. Any file extension is accepted.

    The file is read and decoded before any of it runs. Unreadable or
    undecodable files are not loaded. Once decoded, any exception from
    compiling or executing the module is re-raised as ``LoadError``; the
    partially initialised module is removed from ``sys.modules`` first.
    """

    __slots__ = ("delimiter", "modules")

    def __init__(self, delimiter: str = ".") -> None:
        self.delimiter = delimiter
        self.modules: dict[str, ModuleType] = {}

    def module_name(self, identifier: str) -> str:
        return identifier.strip(self.delimiter).replace(self.delimiter, ".")

    def load(self, identifier: str, path: str) -> bool:
        name = self.module_name(identifier)
        source_loader = importlib.machinery.SourceFileLoader(name, path)
        spec = importlib.util.spec_from_file_location(name, path, loader=source_loader)
        if spec is None:
            logger.debug("No import spec for %s", path)
            return False

        # SyntaxError here means a bad encoding declaration
        try:
            source = importlib.util.decode_source(source_loader.get_data(path))
        except (OSError, UnicodeDecodeError, SyntaxError) as exc:
            logger.debug("Cannot read %s: %s", path, exc)
            return False

        module = importlib.util.module_from_spec(spec)
        sys.modules[name] = module
        try:
            code = compile(source, path, "exec", dont_inherit=True)
            exec(code, module.__dict__)
        except Exception as exc:
            sys.modules.pop(name, None)
            raise LoadError(identifier=identifier, path=path, detail=str(exc)) from exc

        self.modules[identifier] = module
        return True


class PathLoader:
    """Accept any regular file without loading it.

    Turns a resolver into a pure path lookup for callers that load
    (or merely report) files themselves.
    """

    __slots__ = ()

    def load(self, identifier: str, path: str) -> bool:
        return os.path.isfile(path)


class TextLoader:
    """Read located files as UTF-8 text into ``sources``."""

    __slots__ = ("encoding", "sources")

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding
        self.sources: dict[str, str] = {}

    def load(self, identifier: str, path: str) -> bool:
        try:
            with open(path, encoding=self.encoding) as f:
                self.sources[identifier] = f.read()
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("Cannot read %s: %s", path, exc)
            return False
        return True


class TemplateLoader:
    """Compile located files as kida templates.

    Lets a plugin map view namespaces to template directories::

        resolver = PrefixResolver(
            ResolverConfig(extension=".html"),
            loader=TemplateLoader(),
        )
        resolver.register("Plugin.Views", "plugin/templates")

    Compiled templates are kept in ``templates`` keyed by identifier.
    Template syntax errors propagate as ``LoadError``.
    """

    __slots__ = ("_env", "_reader", "templates")

    def __init__(self, env: Environment | None = None) -> None:
        self._env = env if env is not None else Environment(autoescape=True)
        self._reader = TextLoader()
        self.templates: dict[str, Any] = {}

    def load(self, identifier: str, path: str) -> bool:
        if not self._reader.load(identifier, path):
            return False
        source = self._reader.sources.pop(identifier)
        try:
            self.templates[identifier] = self._env.from_string(source)
        except Exception as exc:
            raise LoadError(identifier=identifier, path=path, detail=str(exc)) from exc
        return True

    def render(self, identifier: str, context: dict[str, Any] | None = None) -> str:
        """Render a previously loaded template.

        Raises ``KeyError`` if the identifier was never loaded.
        """
        template = self.templates.get(identifier)
        if template is None:
            msg = f"Template not loaded: {identifier!r}"
            raise KeyError(msg)
        return template.render(context or {})
