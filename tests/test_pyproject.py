from pathlib import Path

import pytest

from pyistubgen.pyproject import Maturin, Project, PyProject, Tool


def _write(directory: Path, text: str, name: str = "pyproject.toml") -> Path:
    path = directory / name
    path.write_text(text, encoding="utf-8")
    return path


def test_pure_project_uses_project_name(tmp_path):
    path = _write(tmp_path, '[project]\nname = "pure"\n')
    pyproject = PyProject.parse_toml(path)
    assert pyproject.project == Project(name="pure")
    assert pyproject.tool is None
    assert pyproject.module_name() == "pure"
    assert pyproject.python_source() is None
    assert pyproject.toml_path == path


def test_mixed_project_reads_maturin_table(tmp_path):
    path = _write(
        tmp_path,
        '[project]\nname = "mixed"\n\n'
        '[tool.maturin]\npython-source = "python"\nmodule-name = "mixed.main_mod"\n',
    )
    pyproject = PyProject.parse_toml(path)
    assert pyproject.tool == Tool(
        maturin=Maturin(python_source="python", module_name="mixed.main_mod")
    )
    assert pyproject.module_name() == "mixed.main_mod"
    assert pyproject.python_source() == tmp_path / "python"


def test_other_tools_are_ignored(tmp_path):
    path = _write(
        tmp_path,
        '[project]\nname = "pure"\n[tool.ruff]\nline-length = 100\n',
    )
    pyproject = PyProject.parse_toml(path)
    assert pyproject.tool == Tool(maturin=None)
    assert pyproject.module_name() == "pure"


def test_module_name_falls_back_when_only_source_given(tmp_path):
    path = _write(
        tmp_path, '[project]\nname = "pure"\n[tool.maturin]\npython-source = "src"\n'
    )
    pyproject = PyProject.parse_toml(path)
    assert pyproject.module_name() == "pure"
    assert pyproject.python_source() == tmp_path / "src"


def test_wrong_file_name_is_rejected(tmp_path):
    path = _write(tmp_path, '[project]\nname = "pure"\n', name="Cargo.toml")
    with pytest.raises(ValueError, match="is not a pyproject.toml"):
        PyProject.parse_toml(path)


def test_missing_project_name_is_rejected(tmp_path):
    path = _write(tmp_path, "[project]\nversion = '1'\n")
    with pytest.raises(ValueError):
        PyProject.parse_toml(path)


def test_malformed_toml_is_rejected(tmp_path):
    path = _write(tmp_path, "[project\nname = ")
    with pytest.raises(ValueError):
        PyProject.parse_toml(path)


def test_missing_file_raises_os_error(tmp_path):
    with pytest.raises(OSError):
        PyProject.parse_toml(tmp_path / "pyproject.toml")