"""Metadata records describing the Python-visible items of an extension."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Hashable

from .typeinfo import TypeInfo


def compare_op_type_input() -> TypeInfo:
    """Input type of the comparison operator argument of `__richcmp__`."""
    return TypeInfo.builtin("int")


def no_return_type_output() -> TypeInfo:
    """Return type of a function that returns nothing."""
    return TypeInfo.none()


class SignatureKind(enum.Enum):
    """How an argument appears in an explicit signature."""

    IDENT = "ident"
    ASSIGN = "assign"
    STAR = "star"
    ARGS = "args"
    KEYWORDS = "keywords"


@dataclass(frozen=True)
class SignatureArg:
    """One entry of an explicit signature; only assignments carry a default."""

    kind: SignatureKind
    default: str | None = None

    def __post_init__(self) -> None:
        if self.kind is SignatureKind.ASSIGN and self.default is None:
            raise ValueError("an assigned signature argument needs a default")
        if self.kind is not SignatureKind.ASSIGN and self.default is not None:
            raise ValueError(f"a {self.kind.value} signature argument takes no default")


class MethodType(enum.Enum):
    """Kind of a class method."""

    INSTANCE = "instance"
    STATIC = "static"
    CLASS = "class"
    NEW = "new"


def _freeze(instance: object, *names: str) -> None:
    for name in names:
        object.__setattr__(instance, name, tuple(getattr(instance, name)))


@dataclass(frozen=True, kw_only=True)
class ArgInfo:
    """An argument of a function or method."""

    name: str
    type_: TypeInfo
    signature: SignatureArg | None = None


@dataclass(frozen=True, kw_only=True)
class MethodInfo:
    """A method of a class."""

    name: str
    args: tuple[ArgInfo, ...] = ()
    return_: TypeInfo = field(default_factory=no_return_type_output)
    doc: str = ""
    type_: MethodType = MethodType.INSTANCE

    def __post_init__(self) -> None:
        _freeze(self, "args")


@dataclass(frozen=True, kw_only=True)
class MemberInfo:
    """An attribute of a class exposed through a getter."""

    name: str
    type_: TypeInfo
    doc: str = ""


@dataclass(frozen=True, kw_only=True)
class PyMethodsInfo:
    """Getters and methods attached to the class or enum identified by `struct_id`."""

    struct_id: Hashable
    getters: tuple[MemberInfo, ...] = ()
    methods: tuple[MethodInfo, ...] = ()

    def __post_init__(self) -> None:
        _freeze(self, "getters", "methods")


@dataclass(frozen=True, kw_only=True)
class PyClassInfo:
    """A class; `module` None places it in the default module."""

    struct_id: Hashable
    pyclass_name: str
    module: str | None = None
    doc: str = ""
    members: tuple[MemberInfo, ...] = ()
    bases: tuple[TypeInfo, ...] = ()

    def __post_init__(self) -> None:
        _freeze(self, "members", "bases")


@dataclass(frozen=True, kw_only=True)
class PyEnumInfo:
    """An enumeration; variants are (name, doc) pairs."""

    enum_id: Hashable
    pyclass_name: str
    module: str | None = None
    doc: str = ""
    variants: tuple[tuple[str, str], ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "variants", tuple((name, doc) for name, doc in self.variants)
        )


@dataclass(frozen=True, kw_only=True)
class PyFunctionInfo:
    """A module-level function."""

    name: str
    args: tuple[ArgInfo, ...] = ()
    return_: TypeInfo = field(default_factory=no_return_type_output)
    doc: str = ""
    module: str | None = None

    def __post_init__(self) -> None:
        _freeze(self, "args")


@dataclass(frozen=True, kw_only=True)
class PyErrorInfo:
    """An exception class deriving from a built-in exception."""

    name: str
    module: str
    base: str


@dataclass(frozen=True, kw_only=True)
class PyVariableInfo:
    """A module-level variable."""

    name: str
    module: str
    type_: TypeInfo