from __future__ import annotations

import re
import unicodedata

JAVA_KEYWORDS = frozenset(
    {
        "_",
        "abstract",
        "assert",
        "boolean",
        "break",
        "byte",
        "case",
        "catch",
        "char",
        "class",
        "const",
        "continue",
        "default",
        "do",
        "double",
        "else",
        "enum",
        "extends",
        "false",
        "final",
        "finally",
        "float",
        "for",
        "goto",
        "if",
        "implements",
        "import",
        "instanceof",
        "int",
        "interface",
        "long",
        "native",
        "new",
        "null",
        "package",
        "private",
        "protected",
        "public",
        "return",
        "short",
        "static",
        "strictfp",
        "super",
        "switch",
        "synchronized",
        "this",
        "throw",
        "throws",
        "transient",
        "true",
        "try",
        "void",
        "volatile",
        "while",
    }
)

_CONNECTOR_OR_CURRENCY = frozenset({"Pc", "Sc"})
_UNDERSCORE_RUN = re.compile(r"(?!^_)_+(.)")


def _is_identifier_start(ch: str) -> bool:
    return ch.isalpha() or unicodedata.category(ch) in _CONNECTOR_OR_CURRENCY


def _is_identifier_part(ch: str) -> bool:
    return _is_identifier_start(ch) or unicodedata.category(ch) == "Nd"


def is_java_identifier(text: str) -> bool:
    if not text or text in JAVA_KEYWORDS:
        return False
    if not _is_identifier_start(text[0]):
        return False
    return all(_is_identifier_part(ch) for ch in text[1:])


def sanitize_type_name(raw_key: str) -> str:
    """Turn a JSON key into a Java type name.

    Only a single leading character is dropped when it cannot start an
    identifier, so keys such as ``"12abc"`` still yield ``"2abc"``.
    """
    name = raw_key
    if name and not _is_identifier_start(name[0]):
        name = name[1:]
    name = "".join(ch for ch in name if _is_identifier_part(ch))

    for index, ch in enumerate(name):
        if ch.isalpha():
            return name[:index] + ch.upper() + name[index + 1 :]
        if unicodedata.category(ch) not in _CONNECTOR_OR_CURRENCY:
            break
    return name


def sanitize_field_name(raw_key: str, is_array: bool = False) -> str:
    """Turn a JSON key into a lower camel case Java field name.

    Array-typed fields are pluralized by appending ``s``. Names starting
    with two uppercase letters (``URLPath``) keep their casing.
    """
    name = raw_key
    if is_array and not name.endswith("s"):
        name += "s"

    start = 0
    while start < len(name) and not _is_identifier_part(name[start]):
        start += 1
    name = "".join(ch if _is_identifier_part(ch) else "_" for ch in name[start:])
    name = _UNDERSCORE_RUN.sub(lambda match: match.group(1).upper(), name)

    if name[:1].isupper() and not name[1:2].isupper():
        name = name[0].lower() + name[1:]
    if name[:1].isdigit():
        name = "_" + name
    if name in JAVA_KEYWORDS:
        name += "_"
    return name


def depluralize(type_name: str) -> str:
    # undoes the single "s" that sanitize_field_name appends to array fields
    if type_name.endswith("s"):
        return type_name[:-1]
    return type_name
