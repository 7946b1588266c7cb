import pytest

from pyistubgen.renaming import RenamingRule

NAMES = ["Float", "Integer", "HTTPServer", "my_variable_name", "myVariableName", "Abc2Def"]
RULE_NAMES = [
    "camelCase",
    "kebab-case",
    "lowercase",
    "PascalCase",
    "SCREAMING-KEBAB-CASE",
    "SCREAMING_SNAKE_CASE",
    "snake_case",
    "UPPERCASE",
]


def test_from_name_screaming_snake():
    assert RenamingRule.from_name("SCREAMING_SNAKE_CASE") is RenamingRule.SCREAMING_SNAKE_CASE


@pytest.mark.parametrize("rule", list(RenamingRule))
def test_from_name_round_trip(rule):
    assert RenamingRule.from_name(rule.value) is rule


@pytest.mark.parametrize("name", ["bogus", "Snake_Case", ""])
def test_from_name_unknown(name):
    assert RenamingRule.from_name(name) is None


def test_uppercase_variants():
    assert RenamingRule.UPPERCASE.apply("Float") == "FLOAT"
    assert RenamingRule.UPPERCASE.apply("Integer") == "INTEGER"


def test_snake_splits_acronyms():
    assert RenamingRule.SNAKE_CASE.apply("HTTPServer") == "http_server"


def test_camel_and_pascal():
    assert RenamingRule.CAMEL_CASE.apply("my_variable_name") == "myVariableName"
    assert RenamingRule.PASCAL_CASE.apply("my_variable_name") == "MyVariableName"


@pytest.mark.parametrize("name", NAMES)
def test_case_rules_agree(name):
    snake = RenamingRule.SNAKE_CASE.apply(name)
    assert RenamingRule.SCREAMING_SNAKE_CASE.apply(name) == snake.upper()
    assert RenamingRule.KEBAB_CASE.apply(name) == snake.replace("_", "-")
    assert RenamingRule.SCREAMING_KEBAB_CASE.apply(name) == snake.replace("_", "-").upper()
    assert RenamingRule.LOWERCASE.apply(name) == name.lower()


@pytest.mark.parametrize("name", NAMES)
@pytest.mark.parametrize("rule_name", RULE_NAMES)
def test_rules_are_idempotent(rule_name, name):
    rule = RenamingRule.from_name(rule_name)
    once = rule.apply(name)
    assert rule.apply(once) == once


@pytest.mark.parametrize("name", NAMES)
def test_camel_pascal_snake_round_trip(name):
    snake = RenamingRule.SNAKE_CASE.apply(name)
    pascal = RenamingRule.PASCAL_CASE.apply(name)
    camel = RenamingRule.CAMEL_CASE.apply(name)
    assert RenamingRule.SNAKE_CASE.apply(pascal) == snake
    assert RenamingRule.SNAKE_CASE.apply(camel) == snake
    assert pascal[:1].lower() + pascal[1:] == camel