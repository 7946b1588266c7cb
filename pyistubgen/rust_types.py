"""Rust type expressions and the Python annotations they map to."""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from typing import Callable, Literal

from .typeinfo import ModuleRef, TypeInfo

Kind = Literal["path", "reference", "tuple", "array", "slice", "lifetime"]

_IDENT = re.compile(r"[A-Za-z_]\w*")
_LEXEME = re.compile(r"::|'[A-Za-z_]\w*|[A-Za-z_]\w*|\d+|[<>,()\[\];&]|\S")


@dataclass(frozen=True)
class RustType:
    """A parsed Rust type.

    `name` is the path of a path type or the text of a lifetime. `args`
    holds the generic arguments of a path, the elements of a tuple, or
    the single element of a reference, array or slice.
    """

    kind: Kind
    name: str = ""
    args: tuple[RustType, ...] = field(default_factory=tuple)
    lifetime: str | None = None
    mutable: bool = False
    length: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", tuple(self.args))

    def __str__(self) -> str:
        match self.kind:
            case "path":
                if self.args:
                    return f"{self.name}<{', '.join(map(str, self.args))}>"
                return self.name
            case "lifetime":
                return self.name
            case "reference":
                prefix = f"&{self.lifetime} " if self.lifetime else "&"
                if self.mutable:
                    prefix += "mut "
                return f"{prefix}{self.args[0]}"
            case "tuple":
                if len(self.args) == 1:
                    return f"({self.args[0]},)"
                return f"({', '.join(map(str, self.args))})"
            case "array":
                return f"[{self.args[0]}; {self.length}]"
            case "slice":
                return f"[{self.args[0]}]"
        raise AssertionError(self.kind)


class _Parser:
    def __init__(self, text: str) -> None:
        self._lexemes = _LEXEME.findall(text)
        self._pos = 0

    def peek(self) -> str | None:
        return self._lexemes[self._pos] if self._pos < len(self._lexemes) else None

    def next(self) -> str:
        lexeme = self.peek()
        if lexeme is None:
            raise ValueError("unexpected end of type")
        self._pos += 1
        return lexeme

    def accept(self, lexeme: str) -> bool:
        if self.peek() == lexeme:
            self._pos += 1
            return True
        return False

    def expect(self, lexeme: str) -> None:
        found = self.peek()
        if not self.accept(lexeme):
            raise ValueError(f"expected {lexeme!r}, found {found!r}")

    def ident(self) -> str:
        lexeme = self.next()
        if not _IDENT.fullmatch(lexeme):
            raise ValueError(f"expected an identifier, found {lexeme!r}")
        return lexeme

    def at_end(self) -> bool:
        return self.peek() is None

    def parse_type(self) -> RustType:
        lexeme = self.peek()
        if lexeme == "&":
            self.next()
            lifetime = self.next() if (self.peek() or "").startswith("'") else None
            mutable = self.accept("mut")
            return RustType(
                "reference", args=(self.parse_type(),), lifetime=lifetime, mutable=mutable
            )
        if lexeme == "(":
            self.next()
            elems: list[RustType] = []
            trailing = False
            while self.peek() != ")":
                elems.append(self.parse_type())
                trailing = self.accept(",")
                if not trailing:
                    break
            self.expect(")")
            if len(elems) == 1 and not trailing:
                return elems[0]
            return RustType("tuple", args=tuple(elems))
        if lexeme == "[":
            self.next()
            elem = self.parse_type()
            if self.accept(";"):
                length = self.next()
                if not (length.isdigit() or _IDENT.fullmatch(length)):
                    raise ValueError(f"invalid array length {length!r}")
                self.expect("]")
                return RustType("array", args=(elem,), length=length)
            self.expect("]")
            return RustType("slice", args=(elem,))
        if lexeme == "::" or (lexeme is not None and _IDENT.fullmatch(lexeme)):
            return self.parse_path()
        raise ValueError(f"unexpected token {lexeme!r}")

    def parse_path(self) -> RustType:
        leading = self.accept("::")
        segments = [self.ident()]
        args: tuple[RustType, ...] = ()
        while True:
            if self.peek() == "<":
                args = self.parse_generics()
                break
            if self.accept("::"):
                if self.peek() == "<":
                    args = self.parse_generics()
                    break
                segments.append(self.ident())
                continue
            break
        if args and self.peek() == "::":
            raise ValueError("generic arguments are only supported on the last path segment")
        name = ("::" if leading else "") + "::".join(segments)
        return RustType("path", name=name, args=args)

    def parse_generics(self) -> tuple[RustType, ...]:
        self.expect("<")
        args: list[RustType] = []
        while self.peek() != ">":
            if (self.peek() or "").startswith("'"):
                args.append(RustType("lifetime", name=self.next()))
            else:
                args.append(self.parse_type())
            if not self.accept(","):
                break
        self.expect(">")
        return tuple(args)


def parse_rust_type(text: str) -> RustType:
    """Parse a Rust type expression; raises ValueError on malformed input."""
    parser = _Parser(text)
    ty = parser.parse_type()
    if not parser.at_end():
        raise ValueError(f"unexpected trailing input in type {text!r}")
    return ty


def _as_rust_type(ty: RustType | str) -> RustType:
    if isinstance(ty, RustType):
        return ty
    if isinstance(ty, str):
        return parse_rust_type(ty)
    raise TypeError(f"expected a Rust type or its text, got {ty!r}")


def _last_ident(ty: RustType) -> str:
    return ty.name.rsplit("::", 1)[-1]


def _type_args(ty: RustType) -> tuple[RustType, ...]:
    return tuple(arg for arg in ty.args if arg.kind != "lifetime")


def remove_lifetime(ty: RustType) -> RustType:
    """Drop reference lifetimes and turn generic lifetimes into `'_`."""
    match ty.kind:
        case "path":
            return replace(
                ty,
                args=tuple(
                    RustType("lifetime", name="'_") if arg.kind == "lifetime" else remove_lifetime(arg)
                    for arg in ty.args
                ),
            )
        case "reference":
            return replace(ty, lifetime=None, args=(remove_lifetime(ty.args[0]),))
        case "tuple" | "array":
            return replace(ty, args=tuple(remove_lifetime(arg) for arg in ty.args))
    return ty


def unwrap_pyresult(ty: RustType) -> RustType:
    """Return `T` for `PyResult<T>`, and any other type unchanged."""
    if ty.kind == "path" and _last_ident(ty) == "PyResult":
        args = _type_args(ty)
        if args:
            return args[0]
    return ty


def escape_return_type(text: RustType | str | None) -> RustType | None:
    """The type a function returns, with `PyResult` and lifetimes removed.

    None or empty text stands for a function without a return type.
    """
    if text is None:
        return None
    if isinstance(text, str):
        text = text.strip().removeprefix("->").strip()
        if not text:
            return None
    return remove_lifetime(unwrap_pyresult(_as_rust_type(text)))


_BUILTINS = ModuleRef("builtins")
_TYPING = ModuleRef("typing")
_DATETIME = ModuleRef("datetime")


def _fixed_types() -> dict[str, tuple[TypeInfo, TypeInfo]]:
    simple: dict[str, TypeInfo] = {}
    for name in ("u8", "u16", "u32", "u64", "u128", "usize",
                 "i8", "i16", "i32", "i64", "i128", "isize"):
        simple[name] = TypeInfo.builtin("int")
    simple["bool"] = TypeInfo.builtin("bool")
    simple["f32"] = simple["f64"] = TypeInfo.builtin("float")
    simple["Complex32"] = simple["Complex64"] = TypeInfo.builtin("complex")
    for name in ("char", "str", "OsStr", "String", "OsString"):
        simple[name] = TypeInfo.builtin("str")
    for name, py in (
        ("SystemTime", "datetime.datetime"),
        ("NaiveDateTime", "datetime.datetime"),
        ("NaiveDate", "datetime.date"),
        ("NaiveTime", "datetime.time"),
        ("FixedOffset", "datetime.tzinfo"),
        ("Utc", "datetime.tzinfo"),
        ("Duration", "datetime.timedelta"),
        ("PyDate", "datetime.date"),
        ("PyDateTime", "datetime.datetime"),
        ("PyDelta", "datetime.timedelta"),
        ("PyTime", "datetime.time"),
        ("PyTzInfo", "datetime.tzinfo"),
    ):
        simple[name] = TypeInfo.with_module(py, _DATETIME)
    for name, py in (
        ("PyInt", "int"), ("PyFloat", "float"), ("PyList", "list"),
        ("PyTuple", "tuple"), ("PySlice", "slice"), ("PyDict", "dict"),
        ("PySet", "set"), ("PyString", "str"), ("PyBackedStr", "str"),
        ("PyByteArray", "bytearray"), ("PyBytes", "bytes"),
        ("PyBackedBytes", "bytes"), ("PyType", "type"), ("CompareOp", "int"),
    ):
        simple[name] = TypeInfo.unqualified(py)
    simple["PyAny"] = TypeInfo.any()
    simple["PyIterator"] = TypeInfo.with_module(
        "collections.abc.Iterator", ModuleRef("collections.abc")
    )
    simple["PyUntypedArray"] = TypeInfo(
        "numpy.typing.NDArray[typing.Any]", {ModuleRef("numpy.typing"), _TYPING}
    )
    simple["PyArrayDescr"] = TypeInfo.with_module("numpy.dtype", ModuleRef("numpy"))

    fixed = {name: (info, info) for name, info in simple.items()}
    path = TypeInfo.with_module("pathlib.Path", ModuleRef("pathlib"))
    fixed["PathBuf"] = (
        path,
        TypeInfo.builtin("str") | TypeInfo.with_module("os.PathLike", ModuleRef("os")) | path,
    )
    return fixed


_WRAPPERS = frozenset(
    {"Box", "Rc", "Arc", "Py", "PyRef", "PyRefMut", "Bound", "Result", "PyResult"}
)

_NUMPY_SCALARS = {
    "i8": "int8", "i16": "int16", "i32": "int32", "i64": "int64",
    "u8": "uint8", "u16": "uint16", "u32": "uint32", "u64": "uint64",
    "f32": "float32", "f64": "float64",
    "Complex32": "complex64", "Complex64": "complex128",
}

_NUMPY_ARRAYS = frozenset(
    f"{base}{suffix}"
    for base in ("PyArray", "PyReadonlyArray", "PyReadwriteArray")
    for suffix in ("", "0", "1", "2", "3", "4", "5", "6", "Dyn")
)


def _require(ty: RustType, args: tuple[RustType, ...], count: int) -> None:
    if len(args) < count:
        raise ValueError(f"{ty} needs {count} type argument(s)")


class TypeMapper:
    """Maps Rust types to the Python annotations used in stub files.

    Every type has an output annotation, used for return values, and an
    input annotation, used for arguments.
    """

    def __init__(self) -> None:
        self._named: dict[str, tuple[TypeInfo, TypeInfo]] = _fixed_types()
        self._generic: dict[str, Callable[[RustType, tuple[RustType, ...], bool], TypeInfo]] = {
            "Option": self._option,
            "Vec": self._vec,
            "HashSet": self._set,
            "BTreeSet": self._set,
            "IndexSet": self._set,
            "HashMap": self._map,
            "BTreeMap": self._map,
            "IndexMap": self._map,
            "Cow": self._cow,
            "DateTime": self._datetime,
            "Either": self._either,
        }
        for name in _NUMPY_ARRAYS:
            self._generic[name] = self._ndarray

    def register(self, name: str, output: TypeInfo, input: TypeInfo | None = None) -> None:
        """Map the Rust type `name` to `output`, and to `input` in arguments."""
        self._named[name.lstrip(":")] = (output, output if input is None else input)

    def type_output(self, ty: RustType | str) -> TypeInfo:
        """The annotation of `ty` as a return type."""
        return self._resolve(_as_rust_type(ty), False)

    def type_input(self, ty: RustType | str) -> TypeInfo:
        """The annotation of `ty` as an argument type."""
        return self._resolve(_as_rust_type(ty), True)

    def _resolve(self, ty: RustType, as_input: bool) -> TypeInfo:
        match ty.kind:
            case "reference":
                return self._resolve(ty.args[0], as_input)
            case "tuple":
                return self._tuple(ty, as_input)
            case "array" | "slice":
                return self._sequence(ty.args[0], as_input)
            case "path":
                return self._resolve_path(ty, as_input)
        raise LookupError(f"no Python type known for Rust type {ty}")

    def _resolve_path(self, ty: RustType, as_input: bool) -> TypeInfo:
        full = ty.name.lstrip(":")
        ident = _last_ident(ty)
        for key in (full, ident):
            if key in self._named:
                output, input_ = self._named[key]
                return input_ if as_input else output
        args = _type_args(ty)
        if ident in _WRAPPERS:
            _require(ty, args, 1)
            return self._resolve(args[0], as_input)
        handler = self._generic.get(ident)
        if handler is None:
            raise LookupError(f"no Python type known for Rust type {ty}")
        return handler(ty, args, as_input)

    def _tuple(self, ty: RustType, as_input: bool) -> TypeInfo:
        if not ty.args:
            return TypeInfo.none()
        if not 2 <= len(ty.args) <= 9:
            raise LookupError(f"no Python type known for Rust type {ty}")
        infos = [self._resolve(elem, as_input) for elem in ty.args]
        imports = frozenset().union(*(info.imports for info in infos))
        return TypeInfo(f"tuple[{', '.join(info.name for info in infos)}]", imports)

    def _sequence(self, elem: RustType, as_input: bool) -> TypeInfo:
        if as_input:
            inner = self._resolve(elem, True)
            return TypeInfo(f"typing.Sequence[{inner.name}]", inner.imports | {_TYPING})
        return TypeInfo.list_of(self._resolve(elem, False))

    def _option(self, ty: RustType, args: tuple[RustType, ...], as_input: bool) -> TypeInfo:
        _require(ty, args, 1)
        inner = self._resolve(args[0], as_input)
        return TypeInfo(f"typing.Optional[{inner.name}]", inner.imports | {_TYPING})

    def _vec(self, ty: RustType, args: tuple[RustType, ...], as_input: bool) -> TypeInfo:
        _require(ty, args, 1)
        return self._sequence(args[0], as_input)

    def _set(self, ty: RustType, args: tuple[RustType, ...], as_input: bool) -> TypeInfo:
        _require(ty, args, 1)
        return TypeInfo.set_of(self._resolve(args[0], False))

    def _map(self, ty: RustType, args: tuple[RustType, ...], as_input: bool) -> TypeInfo:
        _require(ty, args, 2)
        key = self._resolve(args[0], as_input)
        value = self._resolve(args[1], as_input)
        if as_input:
            return TypeInfo(
                f"typing.Mapping[{key.name}, {value.name}]",
                key.imports | value.imports | {_TYPING},
            )
        return TypeInfo(
            f"builtins.dict[{key.name}, {value.name}]",
            key.imports | value.imports | {_BUILTINS},
        )

    def _cow(self, ty: RustType, args: tuple[RustType, ...], as_input: bool) -> TypeInfo:
        _require(ty, args, 1)
        inner = args[0]
        if inner.kind == "path" and _last_ident(inner) in ("str", "OsStr"):
            return TypeInfo.builtin("str")
        if inner.kind == "slice" and str(inner.args[0]) == "u8":
            return TypeInfo.builtin("bytes")
        raise LookupError(f"no Python type known for Rust type {ty}")

    def _datetime(self, ty: RustType, args: tuple[RustType, ...], as_input: bool) -> TypeInfo:
        return TypeInfo.with_module("datetime.datetime", _DATETIME)

    def _either(self, ty: RustType, args: tuple[RustType, ...], as_input: bool) -> TypeInfo:
        _require(ty, args, 2)
        left = self._resolve(args[0], as_input)
        right = self._resolve(args[1], as_input)
        return TypeInfo(
            f"typing.Union[{left.name}, {right.name}]",
            left.imports | right.imports | {_TYPING},
        )

    def _ndarray(self, ty: RustType, args: tuple[RustType, ...], as_input: bool) -> TypeInfo:
        _require(ty, args, 1)
        scalar = args[0]
        dtype = _NUMPY_SCALARS.get(_last_ident(scalar)) if scalar.kind == "path" else None
        if dtype is None:
            raise LookupError(f"{scalar} is not a NumPy scalar type")
        return TypeInfo(
            f"numpy.typing.NDArray[numpy.{dtype}]",
            {ModuleRef("numpy"), ModuleRef("numpy.typing")},
        )


_DEFAULT_MAPPER = TypeMapper()


def type_output(ty: RustType | str) -> TypeInfo:
    """The annotation of `ty` as a return type, using the built-in mappings."""
    return _DEFAULT_MAPPER.type_output(ty)


def type_input(ty: RustType | str) -> TypeInfo:
    """The annotation of `ty` as an argument type, using the built-in mappings."""
    return _DEFAULT_MAPPER.type_input(ty)