"""Generate Python typing stub files from collected type metadata."""

__version__ = "0.9.2"

__all__ = [
    "defs",
    "exceptions",
    "info",
    "module",
    "pyformat",
    "pyproject",
    "registry",
    "renaming",
    "rust_types",
    "stub_info",
    "typeinfo",
]