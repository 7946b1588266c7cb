"""Python type annotations together with the modules they need imported."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import total_ordering
from typing import Iterable


@total_ordering
@dataclass(frozen=True)
class ModuleRef:
    """A reference to a Python module.

    A reference without a name stands for the default module of the
    extension, whose name is only known when stub files are generated.
    Named references sort before the default one, and by name among
    themselves.
    """

    name: str | None = None

    def get(self) -> str | None:
        """Return the module name, or None for the default module."""
        return self.name

    def _sort_key(self) -> tuple[bool, str]:
        return (self.name is None, self.name or "")

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ModuleRef):
            return NotImplemented
        return self._sort_key() < other._sort_key()


def _as_module_ref(module: ModuleRef | str | None) -> ModuleRef:
    if isinstance(module, ModuleRef):
        return module
    return ModuleRef(module)


@dataclass(frozen=True)
class TypeInfo:
    """A Python type annotation and the modules a stub file must import for it."""

    name: str
    imports: frozenset[ModuleRef] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        refs: Iterable[ModuleRef | str | None] = self.imports
        object.__setattr__(
            self, "imports", frozenset(_as_module_ref(ref) for ref in refs)
        )

    def __str__(self) -> str:
        return self.name

    def __or__(self, other: TypeInfo) -> TypeInfo:
        if not isinstance(other, TypeInfo):
            return NotImplemented
        return TypeInfo(f"{self.name} | {other.name}", self.imports | other.imports)

    @classmethod
    def none(cls) -> TypeInfo:
        """The `None` annotation."""
        return cls("None")

    @classmethod
    def any(cls) -> TypeInfo:
        """The `typing.Any` annotation."""
        return cls("typing.Any", {ModuleRef("typing")})

    @classmethod
    def builtin(cls, name: str) -> TypeInfo:
        """A type from the `builtins` module, such as `int` or `dict[str, str]`."""
        return cls(f"builtins.{name}", {ModuleRef("builtins")})

    @classmethod
    def unqualified(cls, name: str) -> TypeInfo:
        """A type name used as is, with nothing to import."""
        return cls(name)

    @classmethod
    def with_module(cls, name: str, module: ModuleRef | str | None) -> TypeInfo:
        """A type that must be imported; the name is qualified with its module."""
        return cls(name, {_as_module_ref(module)})

    @classmethod
    def list_of(cls, inner: TypeInfo) -> TypeInfo:
        """`builtins.list[inner]`."""
        return cls(
            f"builtins.list[{inner.name}]", inner.imports | {ModuleRef("builtins")}
        )

    @classmethod
    def set_of(cls, inner: TypeInfo) -> TypeInfo:
        """`builtins.set[inner]`."""
        return cls(
            f"builtins.set[{inner.name}]", inner.imports | {ModuleRef("builtins")}
        )

    @classmethod
    def dict_of(cls, key: TypeInfo, value: TypeInfo) -> TypeInfo:
        """A two-parameter builtin annotation over a key and a value type."""
        return cls(
            f"builtins.set[{key.name}, {value.name}]",
            key.imports | value.imports | {ModuleRef("builtins")},
        )