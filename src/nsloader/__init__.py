"""nsloader — namespace-to-directory loading for web-application plugins.

Maps fully-qualified identifiers to files by their longest registered
namespace prefix, then loads them.

Basic usage::

    from nsloader import PrefixResolver, ResolutionChain

    resolver = PrefixResolver()
    resolver.register("Plugin", "src/plugin")
    resolver.register("Plugin.Models", "src/models")

    chain = ResolutionChain()
    resolver.install(chain)

    path, found = chain.resolve("Plugin.Models.User")

Templates (kida)::

    from nsloader import ResolverConfig, TemplateLoader

    views = PrefixResolver(ResolverConfig(extension=".html"), loader=TemplateLoader())
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "FileLoader",
    "LoadError",
    "ModuleFileLoader",
    "NsloaderError",
    "PathLoader",
    "PrefixResolver",
    "Resolution",
    "ResolutionChain",
    "Resolver",
    "ResolverConfig",
    "TemplateLoader",
    "TextLoader",
]

# Public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "ConfigurationError": "nsloader.errors",
    "FileLoader": "nsloader.types",
    "LoadError": "nsloader.errors",
    "ModuleFileLoader": "nsloader.loaders",
    "NsloaderError": "nsloader.errors",
    "PathLoader": "nsloader.loaders",
    "PrefixResolver": "nsloader.resolver",
    "Resolution": "nsloader.types",
    "ResolutionChain": "nsloader.chain",
    "Resolver": "nsloader.types",
    "ResolverConfig": "nsloader.config",
    "TemplateLoader": "nsloader.loaders",
    "TextLoader": "nsloader.loaders",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import nsloader`` fast; kida is only imported once a resolver
    or loader is first requested.
    """
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_path), name)
