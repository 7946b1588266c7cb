import pytest

from pyistubgen.typeinfo import ModuleRef, TypeInfo


def test_module_ref_get():
    assert ModuleRef("typing").get() == "typing"
    assert ModuleRef().get() is None


def test_module_ref_ordering_puts_default_last():
    refs = [ModuleRef(), ModuleRef("typing"), ModuleRef("builtins")]
    assert sorted(refs) == [ModuleRef("builtins"), ModuleRef("typing"), ModuleRef()]


def test_module_ref_equality_and_hash():
    assert ModuleRef("os") == ModuleRef("os")
    assert len({ModuleRef("os"), ModuleRef("os"), ModuleRef()}) == 2


def test_strings_are_coerced_to_module_refs():
    info = TypeInfo("typing.Sequence[builtins.int]", {"typing", "builtins"})
    assert info.imports == frozenset({ModuleRef("typing"), ModuleRef("builtins")})


def test_none_has_no_imports():
    info = TypeInfo.none()
    assert info.name == "None"
    assert info.imports == frozenset()


def test_any():
    info = TypeInfo.any()
    assert info.name == "typing.Any"
    assert info.imports == {ModuleRef("typing")}


def test_builtin():
    info = TypeInfo.builtin("bool")
    assert info.name == "builtins.bool"
    assert info.imports == {ModuleRef("builtins")}
    assert str(info) == "builtins.bool"


def test_unqualified():
    info = TypeInfo.unqualified("list")
    assert info.name == "list"
    assert info.imports == frozenset()


def test_with_module():
    info = TypeInfo.with_module("pathlib.Path", "pathlib")
    assert info.name == "pathlib.Path"
    assert info.imports == {ModuleRef("pathlib")}


def test_with_default_module():
    info = TypeInfo.with_module("A", ModuleRef())
    assert info.imports == {ModuleRef()}


def test_list_of():
    info = TypeInfo.list_of(TypeInfo.builtin("int"))
    assert info.name == "builtins.list[builtins.int]"
    assert info.imports == {ModuleRef("builtins")}


def test_set_of():
    info = TypeInfo.set_of(TypeInfo.builtin("int"))
    assert info.name == "builtins.set[builtins.int]"
    assert info.imports == {ModuleRef("builtins")}


def test_dict_of_merges_imports():
    key = TypeInfo.with_module("pathlib.Path", "pathlib")
    value = TypeInfo.any()
    info = TypeInfo.dict_of(key, value)
    assert key.name in info.name and value.name in info.name
    assert info.imports == {
        ModuleRef("pathlib"),
        ModuleRef("typing"),
        ModuleRef("builtins"),
    }


def test_union():
    left = TypeInfo.builtin("str")
    right = TypeInfo.with_module("os.PathLike", "os")
    union = left | right
    assert union.name == f"{left.name} | {right.name}"
    assert union.imports == {ModuleRef("builtins"), ModuleRef("os")}


def test_union_with_non_typeinfo_raises():
    with pytest.raises(TypeError):
        TypeInfo.none() | 3


def test_typeinfo_is_immutable():
    info = TypeInfo.none()
    with pytest.raises(AttributeError):
        info.name = "x"
    assert info.name == "None"