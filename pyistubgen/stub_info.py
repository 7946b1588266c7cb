"""Gathering registered records into modules and writing the stub files."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path

from .defs import ClassDef, EnumDef, ErrorDef, FunctionDef, MemberDef, MethodDef, VariableDef
from .info import (
    PyClassInfo,
    PyEnumInfo,
    PyErrorInfo,
    PyFunctionInfo,
    PyMethodsInfo,
    PyVariableInfo,
)
from .module import Module
from .pyproject import PyProject
from .registry import Registry

logger = logging.getLogger(__name__)


@dataclass
class StubInfo:
    """Stub modules by dotted name, and the directory the files are written under."""

    modules: dict[str, Module] = field(default_factory=dict)
    python_root: Path = Path()

    @classmethod
    def from_pyproject_toml(
        cls, path: str | PathLike[str], registry: Registry
    ) -> StubInfo:
        """Build from a `pyproject.toml` and the records in `registry`.

        Files go under `tool.maturin.python-source` if given, otherwise
        next to the `pyproject.toml`.
        """
        pyproject = PyProject.parse_toml(path)
        root = pyproject.python_source()
        if root is None:
            root = pyproject.toml_path.parent
        return cls.from_project_root(pyproject.module_name(), root, registry)

    @classmethod
    def from_project_root(
        cls,
        default_module_name: str,
        project_root: str | PathLike[str],
        registry: Registry,
    ) -> StubInfo:
        """Build with an explicit default module name and output directory."""
        return _Builder(default_module_name, Path(project_root)).build(registry)

    def generate(self) -> None:
        """Write one `.pyi` file per module.

        A module with submodules becomes a package with an `__init__.pyi`.
        """
        for name, module in self.modules.items():
            path = name.replace(".", "/")
            if module.submodules:
                dest = self.python_root / path / "__init__.pyi"
            else:
                dest = self.python_root / f"{path}.pyi"
            dest.parent.mkdir(parents=True, exist_ok=True)
            dest.write_text(str(module), encoding="utf-8")
            logger.info("Generate stub file of a module `%s` at %s", name, dest)


class _Builder:
    def __init__(self, default_module_name: str, python_root: Path) -> None:
        self._modules: dict[str, Module] = {}
        self._default = default_module_name
        self._root = python_root

    def _module(self, name: str | None) -> Module:
        name = name if name is not None else self._default
        module = self._modules.setdefault(name, Module())
        module.name = name
        module.default_module_name = self._default
        return module

    def _register_submodules(self) -> None:
        for name in list(self._modules):
            parent, dot, child = name.rpartition(".")
            if dot and parent in self._modules:
                self._modules[parent].submodules.add(child)

    def _add_methods(self, info: PyMethodsInfo) -> None:
        for name in sorted(self._modules):
            module = self._modules[name]
            target: ClassDef | EnumDef | None = module.classes.get(info.struct_id)
            if target is None:
                target = module.enums.get(info.struct_id)
            if target is None:
                continue
            target.members.extend(MemberDef.from_info(getter) for getter in info.getters)
            target.methods.extend(MethodDef.from_info(method) for method in info.methods)
            return
        raise LookupError(f"no class or enum with id {info.struct_id!r}")

    def build(self, registry: Registry) -> StubInfo:
        for info in registry.of_kind(PyClassInfo):
            self._module(info.module).classes[info.struct_id] = ClassDef.from_info(info)
        for info in registry.of_kind(PyEnumInfo):
            self._module(info.module).enums[info.enum_id] = EnumDef.from_info(info)
        for info in registry.of_kind(PyFunctionInfo):
            self._module(info.module).functions[info.name] = FunctionDef.from_info(info)
        for info in registry.of_kind(PyErrorInfo):
            self._module(info.module).errors[info.name] = ErrorDef.from_info(info)
        for info in registry.of_kind(PyVariableInfo):
            self._module(info.module).variables[info.name] = VariableDef.from_info(info)
        for info in registry.of_kind(PyMethodsInfo):
            self._add_methods(info)
        self._register_submodules()
        modules = {name: self._modules[name] for name in sorted(self._modules)}
        return StubInfo(modules=modules, python_root=self._root)