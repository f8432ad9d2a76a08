"""
Common string helpers for code generation.

Provides identifier case conversion shared by type mappers, templates,
fallback generators and the artifact assembler.
"""

from __future__ import annotations

import re

_WORD_BOUNDARY = re.compile(r"[A-Z]?[a-z]+|[A-Z]+(?=[A-Z][a-z]|\d|\b|_|-)|[A-Z]+|\d+")


def split_words(text: str) -> list[str]:
    """
    Split an identifier or phrase into words.

    Examples:
        >>> split_words("DataTable")
        ['Data', 'Table']
        >>> split_words("nb-NO")
        ['nb', 'NO']
        >>> split_words("HTMLInput2")
        ['HTML', 'Input', '2']
    """
    words: list[str] = []
    for chunk in re.split(r"[^A-Za-z0-9]+", text):
        if chunk:
            words.extend(_WORD_BOUNDARY.findall(chunk))
    return words


def pascal_case(text: str) -> str:
    return "".join(w[:1].upper() + w[1:].lower() for w in split_words(text))


def camel_case(text: str) -> str:
    pascal = pascal_case(text)
    return pascal[:1].lower() + pascal[1:]


def kebab_case(text: str) -> str:
    return "-".join(w.lower() for w in split_words(text))


def snake_case(text: str) -> str:
    return "_".join(w.lower() for w in split_words(text))


def constant_case(text: str) -> str:
    return "_".join(w.upper() for w in split_words(text))


def identifier(text: str, style: str = "camel", fallback: str = "value") -> str:
    """
    Turn an arbitrary value into a valid identifier in the given case style.

    Leading digits get the fallback word prepended ("2xl" -> "value2Xl").
    """
    converters = {
        "camel": camel_case,
        "pascal": pascal_case,
        "snake": snake_case,
        "constant": constant_case,
    }
    name = converters[style](text)
    if not name:
        name = converters[style](fallback)
    if name[0].isdigit():
        name = converters[style](f"{fallback} {text}")
    return name


def indent(text: str, spaces: int = 4) -> str:
    """
    Indent all non-blank lines in text by the given number of spaces.
    """
    indent_str = " " * spaces
    lines = text.split("\n")
    return "\n".join(indent_str + line if line.strip() else line for line in lines)
