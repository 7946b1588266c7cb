"""Renaming rules for enum variant names."""

from __future__ import annotations

import enum
from typing import Callable, Iterator


def _split_words(name: str) -> Iterator[str]:
    """Split an identifier into words on separators and case boundaries."""
    for chunk in "".join(c if c.isalnum() else " " for c in name).split():
        start = 0
        mode = "boundary"
        for i, (current, following) in enumerate(zip(chunk, chunk[1:])):
            if current.islower():
                next_mode = "lower"
            elif current.isupper():
                next_mode = "upper"
            else:
                next_mode = mode
            if next_mode == "lower" and following.isupper():
                yield chunk[start : i + 1]
                start = i + 1
                mode = "boundary"
            elif mode == "upper" and current.isupper() and following.islower():
                yield chunk[start:i]
                start = i
                mode = "boundary"
            else:
                mode = next_mode
        yield chunk[start:]


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def _join(name: str, sep: str, first: Callable[[str], str], rest: Callable[[str], str]) -> str:
    words = list(_split_words(name))
    return sep.join([first(w) for w in words[:1]] + [rest(w) for w in words[1:]])


class RenamingRule(enum.Enum):
    """A case convention, named as it is written in a `rename_all` option."""

    CAMEL_CASE = "camelCase"
    KEBAB_CASE = "kebab-case"
    LOWERCASE = "lowercase"
    PASCAL_CASE = "PascalCase"
    SCREAMING_KEBAB_CASE = "SCREAMING-KEBAB-CASE"
    SCREAMING_SNAKE_CASE = "SCREAMING_SNAKE_CASE"
    SNAKE_CASE = "snake_case"
    UPPERCASE = "UPPERCASE"

    @classmethod
    def from_name(cls, name: str) -> RenamingRule | None:
        """Return the rule spelled `name`, or None if there is none."""
        try:
            return cls(name)
        except ValueError:
            return None

    def apply(self, name: str) -> str:
        """Rewrite `name` following this rule."""
        lower, upper = str.lower, str.upper
        match self:
            case RenamingRule.CAMEL_CASE:
                return _join(name, "", lower, _capitalize)
            case RenamingRule.KEBAB_CASE:
                return _join(name, "-", lower, lower)
            case RenamingRule.LOWERCASE:
                return name.lower()
            case RenamingRule.PASCAL_CASE:
                return _join(name, "", _capitalize, _capitalize)
            case RenamingRule.SCREAMING_KEBAB_CASE:
                return _join(name, "-", upper, upper)
            case RenamingRule.SCREAMING_SNAKE_CASE:
                return _join(name, "_", upper, upper)
            case RenamingRule.SNAKE_CASE:
                return _join(name, "_", lower, lower)
            case RenamingRule.UPPERCASE:
                return name.upper()
        raise AssertionError(self)