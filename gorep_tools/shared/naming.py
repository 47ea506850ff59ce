"""Naming utilities for Go code generation."""

from __future__ import annotations

import re
from functools import lru_cache

DTO_MARKER = "DTO"
EXPORT_PREFIX = "X"

_NON_IDENTIFIER = re.compile(r"\W")


@lru_cache(maxsize=1024)
def snake_to_camel(value: str) -> str:
    """Convert a snake_case identifier to PascalCase.

    The first character is upper-cased. Every later underscore is dropped
    and upper-cases the character that follows it; everything else is
    copied unchanged.

    Examples:
        >>> snake_to_camel("value_bigint")
        'ValueBigint'
        >>> snake_to_camel("id")
        'Id'
        >>> snake_to_camel("already_Camel")
        'AlreadyCamel'
    """
    if not value:
        return ""

    result = [value[0].upper()]
    upper_next = False
    for letter in value[1:]:
        if upper_next:
            result.append(letter.upper())
            upper_next = False
        elif letter == "_":
            upper_next = True
        else:
            result.append(letter)
    return "".join(result)


@lru_cache(maxsize=1024)
def sanitize_identifier(value: str) -> str:
    """Turn a column or table name into an exported Go identifier.

    Characters that cannot appear in an identifier become underscores
    before the snake_case conversion. A result that would not be exported
    (leading digit or underscore) gets an ``X`` prefix.

    Examples:
        >>> sanitize_identifier("user-name")
        'UserName'
        >>> sanitize_identifier("2fa")
        'X2fa'
    """
    name = snake_to_camel(_NON_IDENTIFIER.sub("_", value))
    if not is_exported(name):
        name = EXPORT_PREFIX + name
    return name


@lru_cache(maxsize=1024)
def lowercase_first(value: str) -> str:
    """Lower-case only the first character.

    Examples:
        >>> lowercase_first("ValueBigint")
        'valueBigint'
    """
    if not value:
        return ""
    return value[0].lower() + value[1:]


@lru_cache(maxsize=1024)
def uppercase_first(value: str) -> str:
    """Upper-case only the first character."""
    if not value:
        return ""
    return value[0].upper() + value[1:]


def strip_dto_marker(name: str) -> str:
    """Remove every ``DTO`` substring from a struct name."""
    return name.replace(DTO_MARKER, "")


def is_exported(name: str) -> bool:
    """Return True if a Go identifier is exported (starts upper-case)."""
    return bool(name) and name[0].isupper()


def split_table_name(table_name: str, default_schema: str) -> tuple[str, str]:
    """Split ``schema.table`` on the first dot.

    Examples:
        >>> split_table_name("public.users", "main")
        ('public', 'users')
        >>> split_table_name("users", "public")
        ('public', 'users')
    """
    schema, dot, table = table_name.partition(".")
    if not dot:
        return default_schema, table_name
    return schema, table
