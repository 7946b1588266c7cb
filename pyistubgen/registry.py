"""Collection of the metadata records that stub generation works from."""

from __future__ import annotations

from typing import TypeVar

from .exceptions import native_exception_name
from .info import (
    PyClassInfo,
    PyEnumInfo,
    PyErrorInfo,
    PyFunctionInfo,
    PyMethodsInfo,
    PyVariableInfo,
)
from .rust_types import RustType, type_output
from .typeinfo import TypeInfo

_KINDS = (
    PyClassInfo,
    PyEnumInfo,
    PyFunctionInfo,
    PyErrorInfo,
    PyVariableInfo,
    PyMethodsInfo,
)

_Info = TypeVar("_Info")

_NATIVE_EXCEPTIONS: dict[str, type[BaseException]] = {
    cls.__name__: cls
    for cls in (
        ArithmeticError, AssertionError, AttributeError, BaseException,
        BlockingIOError, BrokenPipeError, BufferError, BytesWarning,
        ChildProcessError, ConnectionAbortedError, ConnectionError,
        ConnectionRefusedError, ConnectionResetError, DeprecationWarning,
        EOFError, Exception, FileExistsError, FileNotFoundError,
        FloatingPointError, FutureWarning, GeneratorExit, ImportError,
        ImportWarning, IndexError, InterruptedError, IsADirectoryError,
        KeyError, KeyboardInterrupt, LookupError, MemoryError,
        ModuleNotFoundError, NameError, NotADirectoryError,
        NotImplementedError, OSError, OverflowError,
        PendingDeprecationWarning, PermissionError, ProcessLookupError,
        RecursionError, ReferenceError, ResourceWarning, RuntimeError,
        RuntimeWarning, StopAsyncIteration, StopIteration, SyntaxError,
        SyntaxWarning, SystemError, SystemExit, TimeoutError, TypeError,
        UnboundLocalError, UnicodeDecodeError, UnicodeEncodeError,
        UnicodeError, UnicodeTranslateError, UnicodeWarning, UserWarning,
        ValueError, Warning, ZeroDivisionError,
    )
}
_NATIVE_EXCEPTIONS["IOError"] = OSError
_NATIVE_EXCEPTIONS["EnvironmentError"] = OSError


class Registry:
    """Records submitted for stub generation, kept per kind in submission order."""

    def __init__(self) -> None:
        self._items: dict[type, list[object]] = {kind: [] for kind in _KINDS}

    def _kind_of(self, info: object) -> type:
        for kind in _KINDS:
            if isinstance(info, kind):
                return kind
        raise TypeError(f"cannot register {info!r}")

    def submit(self, info: _Info) -> _Info:
        """Add one record and return it."""
        self._items[self._kind_of(info)].append(info)
        return info

    def create_exception(
        self,
        module: str,
        name: str,
        base: str | type[BaseException],
        doc: str = "",
    ) -> type[BaseException]:
        """Create an exception class deriving from a native exception and record it.

        `base` is a native exception class or its binding name such as
        `PyRuntimeError`; anything else raises ValueError.
        """
        base_name = native_exception_name(base)
        if isinstance(base, type):
            base_class = base
        else:
            try:
                base_class = _NATIVE_EXCEPTIONS[base_name]
            except KeyError:
                raise ValueError(f"{base_name} is not available as a built-in exception") from None
        exception = type(name, (base_class,), {"__doc__": doc or None, "__module__": module})
        self.submit(PyErrorInfo(name=name, module=module, base=base_name))
        return exception

    def module_variable(
        self, module: str, name: str, type_: TypeInfo | RustType | str
    ) -> PyVariableInfo:
        """Record a module-level variable; a Rust type is mapped to its output annotation."""
        if not isinstance(type_, TypeInfo):
            type_ = type_output(type_)
        return self.submit(PyVariableInfo(name=name, module=module, type_=type_))

    def of_kind(self, kind: type[_Info]) -> tuple[_Info, ...]:
        """All records of `kind`, in the order they were submitted."""
        if kind not in self._items:
            raise TypeError(f"{kind!r} is not a registrable kind")
        return tuple(self._items[kind])  # type: ignore[arg-type]