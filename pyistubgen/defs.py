"""Definitions that render as parts of a stub file."""

from __future__ import annotations

from dataclasses import dataclass, field

from .info import (
    ArgInfo,
    MemberInfo,
    MethodInfo,
    MethodType,
    PyClassInfo,
    PyEnumInfo,
    PyErrorInfo,
    PyFunctionInfo,
    PyVariableInfo,
    SignatureArg,
    SignatureKind,
)
from .typeinfo import ModuleRef, TypeInfo

INDENT = "    "


def format_docstring(doc: str, indent: str) -> str:
    """A raw docstring block at `indent`, or an empty string for a blank doc."""
    doc = doc.strip()
    if not doc:
        return ""
    lines = [f'{indent}r"""']
    lines.extend(f"{indent}{line.removesuffix(chr(13))}" for line in doc.split("\n"))
    lines.append(f'{indent}"""')
    return "\n".join(lines) + "\n"


@dataclass(frozen=True)
class Arg:
    """An argument in a function or method signature."""

    name: str
    type_: TypeInfo
    signature: SignatureArg | None = None

    @classmethod
    def from_info(cls, info: ArgInfo) -> Arg:
        return cls(name=info.name, type_=info.type_, signature=info.signature)

    def imports(self) -> frozenset[ModuleRef]:
        return self.type_.imports

    def __str__(self) -> str:
        if self.signature is None:
            return f"{self.name}:{self.type_}"
        match self.signature.kind:
            case SignatureKind.IDENT:
                return f"{self.name}:{self.type_}"
            case SignatureKind.ASSIGN:
                return f"{self.name}:{self.type_}={self.signature.default}"
            case SignatureKind.STAR:
                return "*"
            case SignatureKind.ARGS:
                return f"*{self.name}"
            case SignatureKind.KEYWORDS:
                return f"**{self.name}"
        raise AssertionError(self.signature.kind)


@dataclass
class MemberDef:
    """An annotated attribute of a class."""

    name: str
    type_: TypeInfo
    doc: str = ""

    @classmethod
    def from_info(cls, info: MemberInfo) -> MemberDef:
        return cls(name=info.name, type_=info.type_, doc=info.doc)

    def imports(self) -> frozenset[ModuleRef]:
        return self.type_.imports

    def __str__(self) -> str:
        return f"{INDENT}{self.name}: {self.type_}\n" + format_docstring(self.doc, INDENT)


def _signature_imports(return_: TypeInfo, args: list[Arg]) -> frozenset[ModuleRef]:
    return return_.imports.union(*(arg.imports() for arg in args))


@dataclass
class MethodDef:
    """A method of a class."""

    name: str
    args: list[Arg] = field(default_factory=list)
    return_: TypeInfo = field(default_factory=TypeInfo.none)
    doc: str = ""
    type_: MethodType = MethodType.INSTANCE

    @classmethod
    def from_info(cls, info: MethodInfo) -> MethodDef:
        return cls(
            name=info.name,
            args=[Arg.from_info(arg) for arg in info.args],
            return_=info.return_,
            doc=info.doc,
            type_=info.type_,
        )

    def imports(self) -> frozenset[ModuleRef]:
        return _signature_imports(self.return_, self.args)

    def __str__(self) -> str:
        match self.type_:
            case MethodType.STATIC:
                head, receiver = f"{INDENT}@staticmethod\n", []
            case MethodType.CLASS:
                head, receiver = f"{INDENT}@classmethod\n", ["cls"]
            case MethodType.NEW:
                head, receiver = "", ["cls"]
            case _:
                head, receiver = "", ["self"]
        params = ", ".join([*receiver, *map(str, self.args)])
        text = f"{head}{INDENT}def {self.name}({params}) -> {self.return_}:"
        if self.doc:
            return text + "\n" + format_docstring(self.doc, INDENT * 2)
        return text + " ...\n"


@dataclass
class FunctionDef:
    """A module-level function."""

    name: str
    args: list[Arg] = field(default_factory=list)
    return_: TypeInfo = field(default_factory=TypeInfo.none)
    doc: str = ""

    @classmethod
    def from_info(cls, info: PyFunctionInfo) -> FunctionDef:
        return cls(
            name=info.name,
            args=[Arg.from_info(arg) for arg in info.args],
            return_=info.return_,
            doc=info.doc,
        )

    def imports(self) -> frozenset[ModuleRef]:
        return _signature_imports(self.return_, self.args)

    def __str__(self) -> str:
        params = ", ".join(map(str, self.args))
        text = f"def {self.name}({params}) -> {self.return_}:"
        if self.doc:
            text += "\n" + format_docstring(self.doc, INDENT)
        else:
            text += " ...\n"
        return text + "\n"


@dataclass
class ClassDef:
    """A class with its members, methods and base classes."""

    name: str
    doc: str = ""
    members: list[MemberDef] = field(default_factory=list)
    methods: list[MethodDef] = field(default_factory=list)
    bases: list[TypeInfo] = field(default_factory=list)

    @classmethod
    def from_info(cls, info: PyClassInfo) -> ClassDef:
        """Start a class definition; methods are attached afterwards."""
        return cls(
            name=info.pyclass_name,
            doc=info.doc,
            members=[MemberDef.from_info(member) for member in info.members],
            bases=list(info.bases),
        )

    def imports(self) -> frozenset[ModuleRef]:
        return frozenset().union(
            *(base.imports for base in self.bases),
            *(member.imports() for member in self.members),
            *(method.imports() for method in self.methods),
        )

    def __str__(self) -> str:
        bases = f"({', '.join(base.name for base in self.bases)})" if self.bases else ""
        parts = [f"class {self.name}{bases}:\n", format_docstring(self.doc, INDENT)]
        parts.extend(map(str, self.members))
        parts.extend(map(str, self.methods))
        if not self.members and not self.methods:
            parts.append(f"{INDENT}...\n")
        parts.append("\n")
        return "".join(parts)


@dataclass
class EnumDef:
    """An enumeration with its variants, members and methods."""

    name: str
    doc: str = ""
    variants: tuple[tuple[str, str], ...] = ()
    methods: list[MethodDef] = field(default_factory=list)
    members: list[MemberDef] = field(default_factory=list)

    @classmethod
    def from_info(cls, info: PyEnumInfo) -> EnumDef:
        return cls(name=info.pyclass_name, doc=info.doc, variants=tuple(info.variants))

    def __str__(self) -> str:
        parts = [f"class {self.name}(Enum):\n", format_docstring(self.doc, INDENT)]
        for variant, variant_doc in self.variants:
            parts.append(f"{INDENT}{variant} = ...\n")
            parts.append(format_docstring(variant_doc, INDENT))
        for member in self.members:
            parts.append("\n" + str(member))
        for method in self.methods:
            parts.append("\n" + str(method))
        parts.append("\n")
        return "".join(parts)


@dataclass(frozen=True)
class ErrorDef:
    """An exception class."""

    name: str
    base: str

    @classmethod
    def from_info(cls, info: PyErrorInfo) -> ErrorDef:
        return cls(name=info.name, base=info.base)

    def __str__(self) -> str:
        return f"class {self.name}({self.base}): ...\n"


@dataclass(frozen=True)
class VariableDef:
    """An annotated module-level variable."""

    name: str
    type_: TypeInfo

    @classmethod
    def from_info(cls, info: PyVariableInfo) -> VariableDef:
        return cls(name=info.name, type_=info.type_)

    def __str__(self) -> str:
        return f"{self.name}: {self.type_}"