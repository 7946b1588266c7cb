from pyistubgen.defs import (
    Arg,
    ClassDef,
    EnumDef,
    ErrorDef,
    FunctionDef,
    MethodDef,
    VariableDef,
)
from pyistubgen.module import Module
from pyistubgen.typeinfo import ModuleRef, TypeInfo

INT = TypeInfo.builtin("int")


def _module(**kwargs):
    kwargs.setdefault("name", "pure")
    kwargs.setdefault("default_module_name", "pure")
    return Module(**kwargs)


def test_header_lines():
    lines = str(_module()).splitlines()
    assert lines[1] == "# ruff: noqa: E501, F401"
    assert lines[2] == ""


def test_imports_union_of_classes_and_functions():
    cls = ClassDef(name="A", members=[], bases=[TypeInfo.any()])
    function = FunctionDef(name="f", args=[Arg(name="x", type_=INT)])
    module = _module(classes={"A": cls}, functions={"f": function})
    assert module.imports() == cls.imports() | function.imports()
    lines = str(module).splitlines()
    assert lines.index("import builtins") < lines.index("import typing")


def test_default_module_import_skipped_in_itself():
    default_ref = TypeInfo.with_module("B", None)
    function = FunctionDef(name="create_b", return_=default_ref)
    module = _module(functions={"create_b": function})
    assert "import pure" not in str(module).splitlines()
    sub = _module(name="pure.main_mod", functions={"create_b": function})
    assert "import pure" in str(sub).splitlines()


def test_named_imports_come_before_default():
    function = FunctionDef(
        name="f",
        args=[Arg(name="a", type_=TypeInfo.with_module("zzz.T", "zzz"))],
        return_=TypeInfo.with_module("B", None),
    )
    module = _module(name="other", functions={"f": function})
    lines = str(module).splitlines()
    assert lines.index("import zzz") < lines.index("import pure")


def test_submodules_sorted():
    module = _module(submodules={"sub_mod", "int"})
    lines = str(module).splitlines()
    assert lines.index("from . import int") < lines.index("from . import sub_mod")


def test_enum_import_only_with_enums():
    assert "from enum import Enum" not in str(_module())
    with_enum = _module(enums={"E": EnumDef(name="Number", variants=(("FLOAT", ""),))})
    text = str(with_enum)
    assert "from enum import Enum" in text.splitlines()
    assert str(with_enum.enums["E"]) in text


def test_classes_sorted_by_name():
    module = _module(
        classes={2: ClassDef(name="B"), 1: ClassDef(name="A", methods=[MethodDef(name="show_x")])}
    )
    text = str(module)
    assert text.index(str(module.classes[1])) < text.index(str(module.classes[2]))


def test_functions_and_errors_sorted_and_last():
    module = _module(
        functions={"sum": FunctionDef(name="sum"), "create_a": FunctionDef(name="create_a")},
        errors={"ZError": ErrorDef("ZError", "ValueError"), "MyError": ErrorDef("MyError", "RuntimeError")},
    )
    text = str(module)
    assert text.index("def create_a(") < text.index("def sum(")
    assert text.index("class MyError(") < text.index("class ZError(")
    assert text.endswith(str(module.errors["ZError"]) + "\n")
    assert text.index("def sum(") < text.index("class MyError(")


def test_variables_precede_classes():
    module = _module(
        variables={"MY_CONSTANT": VariableDef("MY_CONSTANT", INT)},
        classes={"A": ClassDef(name="A")},
    )
    lines = str(module).splitlines()
    assert lines.index("MY_CONSTANT: builtins.int") < lines.index("class A:")
    assert module.imports() == frozenset()
    assert ModuleRef("builtins") not in module.imports()
    assert not any(line.startswith("import ") for line in lines)