# pyistubgen

`pyistubgen` writes Python typing stub files (`*.pyi`) for native extension
modules. You describe what a module exposes (classes, enums, methods,
functions, exceptions and module-level variables) as metadata records, and
the package lays out one stub file per (sub-)module, with the `import` lines
each file needs.

## Install

```
pip install pyistubgen
```

The package has no runtime dependencies. To run the test suite:

```
pip install "pyistubgen[test]"
pytest
```

## Describing types

`pyistubgen.typeinfo.TypeInfo` is an annotation together with the modules
(`ModuleRef`) it needs imported. A `ModuleRef` without a name stands for the
extension's default module, whose name is filled in when the stubs are
written.

```python
from pyistubgen.typeinfo import TypeInfo

annotation = TypeInfo.builtin("int") | TypeInfo.none()
print(annotation)              # builtins.int | None
print(sorted(annotation.imports))
```

Other constructors: `TypeInfo.none()`, `TypeInfo.any()`,
`TypeInfo.unqualified(name)`, `TypeInfo.with_module(name, module)`,
`TypeInfo.list_of(inner)` and `TypeInfo.set_of(inner)`.

### From native type names

`pyistubgen.rust_types` parses native type expressions (`parse_rust_type`)
and maps them to annotations. `type_output` gives the form used for return
values, `type_input` the form used for arguments:

```python
from pyistubgen.rust_types import type_input, type_output

str(type_output("Vec<u32>"))              # builtins.list[builtins.int]
str(type_input("Vec<u32>"))               # typing.Sequence[builtins.int]
str(type_input("HashMap<u32, String>"))   # typing.Mapping[builtins.int, builtins.str]
```

Wrappers such as `Box`, `Arc`, `Py`, `Bound` and `PyResult` map to their
inner type; `Option`, sets, maps, tuples, `Either`, date and time types,
paths and NumPy arrays are also known. A name that is not known raises
`LookupError`. To add your own types, create a `TypeMapper` and call
`register(name, output, input)` on it. `escape_return_type` turns the text of
a return type into the type a function really returns, dropping `PyResult`
and lifetimes.

## Collecting metadata

The records in `pyistubgen.info` are `PyClassInfo`, `PyEnumInfo`,
`PyMethodsInfo`, `PyFunctionInfo`, `PyErrorInfo` and `PyVariableInfo`, built
from `ArgInfo`, `MemberInfo`, `MethodInfo`, `MethodType` and `SignatureArg`.
They are submitted to a `pyistubgen.registry.Registry`:

```python
from pyistubgen.info import ArgInfo, MemberInfo, MethodInfo, PyClassInfo, PyMethodsInfo
from pyistubgen.registry import Registry
from pyistubgen.rust_types import type_input, type_output
from pyistubgen.typeinfo import TypeInfo

registry = Registry()
registry.submit(PyClassInfo(
    struct_id="MyClass",
    pyclass_name="MyClass",
    module="my_module",
    members=(MemberInfo(name="name", type_=type_output("String")),),
))
registry.submit(PyMethodsInfo(
    struct_id="MyClass",
    methods=(MethodInfo(name="scale", args=(ArgInfo(name="x", type_=type_input("f64")),),
                        return_=type_output("f64")),),
))
registry.create_exception("my_module", "MyError", "PyRuntimeError")
registry.module_variable("my_module", "MY_CONSTANT", TypeInfo.builtin("int"))
```

`create_exception` accepts a built-in exception class or its binding name
(`PyRuntimeError`, `PyValueError`, …), returns a new exception class and
records it; anything else raises `ValueError`. `module_variable` also accepts
a native type name, which is mapped with `type_output`.

## Generating stubs

`pyistubgen.stub_info.StubInfo` gathers a registry into modules and writes
the files:

```python
from pyistubgen.stub_info import StubInfo

stubs = StubInfo.from_pyproject_toml("pyproject.toml", registry)
stubs.generate()
```

The default module name is `tool.maturin.module-name` if set, otherwise
`project.name`. Files are written under `tool.maturin.python-source` if set,
otherwise next to `pyproject.toml`. `StubInfo.from_project_root(name, root,
registry)` takes both explicitly. A module with submodules is written as
`<path>/__init__.pyi`, any other as `<path>.pyi`. Methods submitted for a
class or enum that was never submitted raise `LookupError`.

`pyistubgen.pyproject.PyProject.parse_toml` reads the `pyproject.toml`; it
raises `ValueError` for a file with another name or without `project.name`.

## Other pieces

- `pyistubgen.defs` holds the definitions (`Arg`, `MemberDef`, `MethodDef`,
  `FunctionDef`, `ClassDef`, `EnumDef`, `ErrorDef`, `VariableDef`) whose
  `str()` is their stub text, and `format_docstring`.
  `pyistubgen.module.Module` combines them into a whole file.

  ```python
  from pyistubgen.defs import Arg, MethodDef
  from pyistubgen.typeinfo import TypeInfo

  method = MethodDef(name="foo", args=[Arg("x", TypeInfo.builtin("int"))],
                     return_=TypeInfo.builtin("int"), doc="This is a foo method.")
  print(method)
  #     def foo(self, x:builtins.int) -> builtins.int:
  #         r"""
  #         This is a foo method.
  #         """
  ```

- `pyistubgen.renaming.RenamingRule` applies naming conventions such as
  `UPPERCASE` or `SCREAMING_SNAKE_CASE`:
  `RenamingRule.from_name("UPPERCASE").apply("Float")` gives `"FLOAT"`.
- `pyistubgen.pyformat.fmt_py_obj` renders a default argument value for a
  signature, falling back to `...` when the value cannot be written back as
  Python source.
- `pyistubgen.exceptions.native_exception_name` gives the Python name of a
  supported built-in exception.

## What it does not do

`pyistubgen` has no command-line tool and does not inspect compiled
extension modules or their source code. The metadata records must be built
and submitted by your own code, and stubs are written by calling
`StubInfo.generate()` from a script of your own.