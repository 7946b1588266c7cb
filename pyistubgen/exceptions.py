"""Names of the built-in Python exceptions that user exceptions may extend."""

from __future__ import annotations

NATIVE_EXCEPTIONS = frozenset(
    {
        "ArithmeticError",
        "AssertionError",
        "AttributeError",
        "BaseException",
        "BlockingIOError",
        "BrokenPipeError",
        "BufferError",
        "BytesWarning",
        "ChildProcessError",
        "ConnectionAbortedError",
        "ConnectionError",
        "ConnectionRefusedError",
        "ConnectionResetError",
        "DeprecationWarning",
        "EOFError",
        "EnvironmentError",
        "Exception",
        "FileExistsError",
        "FileNotFoundError",
        "FloatingPointError",
        "FutureWarning",
        "GeneratorExit",
        "IOError",
        "ImportError",
        "ImportWarning",
        "IndexError",
        "InterruptedError",
        "IsADirectoryError",
        "KeyError",
        "KeyboardInterrupt",
        "LookupError",
        "MemoryError",
        "ModuleNotFoundError",
        "NameError",
        "NotADirectoryError",
        "NotImplementedError",
        "OSError",
        "OverflowError",
        "PendingDeprecationWarning",
        "PermissionError",
        "ProcessLookupError",
        "RecursionError",
        "ReferenceError",
        "ResourceWarning",
        "RuntimeError",
        "RuntimeWarning",
        "StopAsyncIteration",
        "StopIteration",
        "SyntaxError",
        "SyntaxWarning",
        "SystemError",
        "SystemExit",
        "TimeoutError",
        "TypeError",
        "UnboundLocalError",
        "UnicodeDecodeError",
        "UnicodeEncodeError",
        "UnicodeError",
        "UnicodeTranslateError",
        "UnicodeWarning",
        "UserWarning",
        "ValueError",
        "Warning",
        "ZeroDivisionError",
    }
)


def native_exception_name(rust_name: str | type[BaseException]) -> str:
    """Return the Python name of a native exception.

    Accepts the binding name (`PyValueError`) or the exception class itself.
    Raises ValueError for anything that is not a supported native exception.
    """
    if isinstance(rust_name, type) and issubclass(rust_name, BaseException):
        name = rust_name.__name__
    elif isinstance(rust_name, str) and rust_name.startswith("Py"):
        name = rust_name[2:]
    else:
        raise ValueError(f"{rust_name!r} is not a native exception")
    if name not in NATIVE_EXCEPTIONS:
        raise ValueError(f"{rust_name!r} is not a native exception")
    return name