"""A single stub file for a Python module or submodule."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Hashable

from .defs import ClassDef, EnumDef, ErrorDef, FunctionDef, VariableDef
from .typeinfo import ModuleRef

HEADER = "# This file is automatically generated by pyistubgen\n# ruff: noqa: E501, F401\n\n"


@dataclass
class Module:
    """Everything that goes into one `*.pyi` file."""

    classes: dict[Hashable, ClassDef] = field(default_factory=dict)
    enums: dict[Hashable, EnumDef] = field(default_factory=dict)
    functions: dict[str, FunctionDef] = field(default_factory=dict)
    errors: dict[str, ErrorDef] = field(default_factory=dict)
    variables: dict[str, VariableDef] = field(default_factory=dict)
    name: str = ""
    default_module_name: str = ""
    submodules: set[str] = field(default_factory=set)

    def imports(self) -> frozenset[ModuleRef]:
        """Modules referred to by the classes and functions of this module."""
        return frozenset().union(
            *(cls.imports() for cls in self.classes.values()),
            *(function.imports() for function in self.functions.values()),
        )

    def __str__(self) -> str:
        parts = [HEADER]
        for ref in sorted(self.imports()):
            name = ref.get() or self.default_module_name
            if name != self.name:
                parts.append(f"import {name}\n")
        parts.extend(f"from . import {sub}\n" for sub in sorted(self.submodules))
        if self.enums:
            parts.append("from enum import Enum\n")
        parts.append("\n")
        parts.extend(f"{self.variables[key]}\n" for key in sorted(self.variables))
        parts.extend(map(str, sorted(self.classes.values(), key=lambda c: c.name)))
        parts.extend(map(str, sorted(self.enums.values(), key=lambda e: e.name)))
        parts.extend(str(self.functions[key]) for key in sorted(self.functions))
        parts.extend(f"{self.errors[key]}\n" for key in sorted(self.errors))
        return "".join(parts)