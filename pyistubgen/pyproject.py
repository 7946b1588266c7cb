"""Reading the project name and layout from a `pyproject.toml` file."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Any, Mapping


def _table(data: Mapping[str, Any], key: str, where: str) -> Mapping[str, Any] | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, dict):
        raise ValueError(f"`{where}{key}` must be a table")
    return value


def _optional_str(data: Mapping[str, Any], key: str, where: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"`{where}{key}` must be a string")
    return value


@dataclass(frozen=True)
class Project:
    """The `[project]` table."""

    name: str


@dataclass(frozen=True)
class Maturin:
    """The `[tool.maturin]` table."""

    python_source: str | None = None
    module_name: str | None = None


@dataclass(frozen=True)
class Tool:
    """The `[tool]` table, as far as it is read."""

    maturin: Maturin | None = None


@dataclass(frozen=True)
class PyProject:
    """The parts of a `pyproject.toml` that decide where stub files go."""

    project: Project
    tool: Tool | None = None
    toml_path: Path = Path()

    @classmethod
    def parse_toml(cls, path: str | PathLike[str]) -> PyProject:
        """Read `path`, which must be a file named `pyproject.toml`.

        Raises ValueError for another file name or malformed content, and
        OSError when the file cannot be read.
        """
        path = Path(path)
        if path.name != "pyproject.toml":
            raise ValueError(f"{path} is not a pyproject.toml")
        with path.open("rb") as handle:
            data = tomllib.load(handle)

        project_table = _table(data, "project", "")
        if project_table is None:
            raise ValueError(f"{path} has no `project` table")
        name = _optional_str(project_table, "name", "project.")
        if name is None:
            raise ValueError(f"{path} has no `project.name`")

        tool = None
        tool_table = _table(data, "tool", "")
        if tool_table is not None:
            maturin = None
            maturin_table = _table(tool_table, "maturin", "tool.")
            if maturin_table is not None:
                maturin = Maturin(
                    python_source=_optional_str(
                        maturin_table, "python-source", "tool.maturin."
                    ),
                    module_name=_optional_str(
                        maturin_table, "module-name", "tool.maturin."
                    ),
                )
            tool = Tool(maturin=maturin)

        return cls(project=Project(name=name), tool=tool, toml_path=path)

    def _maturin(self) -> Maturin | None:
        return self.tool.maturin if self.tool is not None else None

    def module_name(self) -> str:
        """`tool.maturin.module-name` if given, otherwise `project.name`."""
        maturin = self._maturin()
        if maturin is not None and maturin.module_name is not None:
            return maturin.module_name
        return self.project.name

    def python_source(self) -> Path | None:
        """The Python source directory of a mixed project, relative to this file.

        None means the project has no `tool.maturin.python-source`.
        """
        maturin = self._maturin()
        if maturin is None or maturin.python_source is None:
            return None
        return self.toml_path.parent / maturin.python_source