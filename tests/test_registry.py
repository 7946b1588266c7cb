import pytest

from pyistubgen.info import PyClassInfo, PyErrorInfo, PyFunctionInfo, PyVariableInfo
from pyistubgen.registry import Registry
from pyistubgen.typeinfo import TypeInfo


def test_submit_keeps_order_per_kind():
    registry = Registry()
    first = PyFunctionInfo(name="sum")
    cls = PyClassInfo(struct_id="A", pyclass_name="A")
    second = PyFunctionInfo(name="str_len")
    for info in (first, cls, second):
        assert registry.submit(info) is info
    assert registry.of_kind(PyFunctionInfo) == (first, second)
    assert registry.of_kind(PyClassInfo) == (cls,)
    assert registry.of_kind(PyErrorInfo) == ()


def test_submit_rejects_unknown_records():
    registry = Registry()
    with pytest.raises(TypeError):
        registry.submit(object())


def test_of_kind_rejects_unknown_kinds():
    with pytest.raises(TypeError):
        Registry().of_kind(dict)


def test_create_exception_by_binding_name():
    registry = Registry()
    error = registry.create_exception("pure", "MyError", "PyRuntimeError")
    assert issubclass(error, RuntimeError)
    assert error.__name__ == "MyError"
    assert error.__module__ == "pure"
    assert registry.of_kind(PyErrorInfo) == (
        PyErrorInfo(name="MyError", module="pure", base="RuntimeError"),
    )


def test_create_exception_by_class_with_doc():
    registry = Registry()
    error = registry.create_exception("pure", "BadValue", ValueError, "Bad value.")
    assert issubclass(error, ValueError)
    assert error.__doc__ == "Bad value."
    assert registry.of_kind(PyErrorInfo)[0].base == "ValueError"


def test_create_exception_rejects_non_native_base():
    registry = Registry()
    with pytest.raises(ValueError):
        registry.create_exception("pure", "MyError", "PyNoSuchError")
    assert registry.of_kind(PyErrorInfo) == ()


def test_module_variable_from_rust_type():
    registry = Registry()
    info = registry.module_variable("pure", "MY_CONSTANT", "usize")
    assert info == PyVariableInfo(
        name="MY_CONSTANT", module="pure", type_=TypeInfo.builtin("int")
    )
    assert registry.of_kind(PyVariableInfo) == (info,)


def test_module_variable_from_type_info():
    registry = Registry()
    annotation = TypeInfo.with_module("pathlib.Path", "pathlib")
    info = registry.module_variable("pure", "ROOT", annotation)
    assert info.type_ is annotation