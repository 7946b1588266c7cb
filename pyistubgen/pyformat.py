"""Render Python default values as text suitable for a stub file."""

from __future__ import annotations

import ast
from typing import Any

_SAFE_CONSTRUCTORS: dict[str, Any] = {
    constructor.__name__: constructor
    for constructor in (
        bool,
        int,
        float,
        complex,
        str,
        bytes,
        bytearray,
        tuple,
        list,
        dict,
        set,
        frozenset,
        range,
    )
}


class _Unsupported(Exception):
    """Raised for expressions the restricted evaluator does not handle."""


def all_builtin_types(value: Any) -> bool:
    """Whether `value` is built only of str, bool, int, float, None, dict, list and tuple."""
    if value is None or isinstance(value, (str, bool, int, float)):
        return True
    if isinstance(value, dict):
        return all(
            all_builtin_types(key) and all_builtin_types(item)
            for key, item in value.items()
        )
    if isinstance(value, (list, tuple)):
        return all(all_builtin_types(item) for item in value)
    return False


def _evaluate(node: ast.AST, namespace: dict[str, Any]) -> Any:
    match node:
        case ast.Constant(value=constant):
            return constant
        case ast.Name(id=name):
            if name in namespace:
                return namespace[name]
            raise _Unsupported(name)
        case ast.Attribute(value=inner, attr=attr):
            if attr.startswith("_"):
                raise _Unsupported(attr)
            return getattr(_evaluate(inner, namespace), attr)
        case ast.Call(func=func, args=args, keywords=keywords):
            target = _evaluate(func, namespace)
            positional = [_evaluate(arg, namespace) for arg in args]
            named = {}
            for keyword in keywords:
                if keyword.arg is None:
                    raise _Unsupported("**")
                named[keyword.arg] = _evaluate(keyword.value, namespace)
            return target(*positional, **named)
        case ast.Tuple(elts=elements):
            return tuple(_evaluate(e, namespace) for e in elements)
        case ast.List(elts=elements):
            return [_evaluate(e, namespace) for e in elements]
        case ast.Set(elts=elements):
            return {_evaluate(e, namespace) for e in elements}
        case ast.Dict(keys=keys, values=values):
            result = {}
            for key, item in zip(keys, values):
                if key is None:
                    raise _Unsupported("**")
                result[_evaluate(key, namespace)] = _evaluate(item, namespace)
            return result
        case ast.UnaryOp(op=ast.USub(), operand=operand):
            return -_evaluate(operand, namespace)
        case ast.UnaryOp(op=ast.UAdd(), operand=operand):
            return +_evaluate(operand, namespace)
        case ast.BinOp(left=left, op=ast.Add(), right=right):
            return _evaluate(left, namespace) + _evaluate(right, namespace)
        case ast.BinOp(left=left, op=ast.Sub(), right=right):
            return _evaluate(left, namespace) - _evaluate(right, namespace)
    raise _Unsupported(type(node).__name__)


def valid_external_repr(value: Any) -> bool | None:
    """Whether rebuilding `value` from its repr gives an equal value.

    Only the value's own type, by its name, and a few built-in
    constructors are known while rebuilding. Returns None when the repr
    cannot be rebuilt or compared.
    """
    value_type = type(value)
    namespace = {**_SAFE_CONSTRUCTORS, value_type.__name__: value_type}
    try:
        tree = ast.parse(repr(value), mode="eval")
        rebuilt = _evaluate(tree.body, namespace)
        return bool(rebuilt == value)
    except Exception:
        return None


def fmt_py_obj(value: Any) -> str:
    """The repr of `value` if it can stand in a stub file, otherwise `...`."""
    if all_builtin_types(value) or valid_external_repr(value) is True:
        try:
            return repr(value)
        except Exception:
            pass
    return "..."