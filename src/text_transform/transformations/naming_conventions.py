"""
Naming convention converters.

Converts free text or identifiers between camelCase, PascalCase, snake_case,
kebab-case and the less common programming conventions.
"""

import re

_WORD_BREAK = re.compile(r"[^a-zA-Z0-9]+(.)")
_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]")
_NON_ALNUM_RUN = re.compile(r"[^a-zA-Z0-9]+")
_LOWER_UPPER = re.compile(r"([a-z])([A-Z])")


def _join_words(text: str, separator: str) -> str:
    """Split on case changes and punctuation, then join lowercase words."""
    text = _LOWER_UPPER.sub(lambda m: m.group(1) + separator + m.group(2), text)
    text = _NON_ALNUM_RUN.sub(lambda m: separator, text)
    return text.strip(separator).lower()


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:]


def to_camel_case(text: str) -> str:
    """'hello world' -> 'helloWorld'"""
    text = _WORD_BREAK.sub(lambda m: m.group(1).upper(), text)
    text = re.sub(r"^[A-Z]", lambda m: m.group(0).lower(), text)
    return _NON_ALNUM.sub("", text)


def to_pascal_case(text: str) -> str:
    """'hello world' -> 'HelloWorld'"""
    text = _WORD_BREAK.sub(lambda m: m.group(1).upper(), text)
    text = re.sub(r"^[a-z]", lambda m: m.group(0).upper(), text)
    return _NON_ALNUM.sub("", text)


def to_snake_case(text: str) -> str:
    """'hello world' -> 'hello_world'"""
    return _join_words(text, "_")


def to_screaming_snake_case(text: str) -> str:
    """'hello world' -> 'HELLO_WORLD'"""
    return to_snake_case(text).upper()


def to_kebab_case(text: str) -> str:
    """'hello world' -> 'hello-world'"""
    return _join_words(text, "-")


def to_train_case(text: str) -> str:
    """'hello world' -> 'Hello-World' (HTTP header case)"""
    return "-".join(_capitalize(word) for word in to_kebab_case(text).split("-"))


def to_dot_case(text: str) -> str:
    """'hello world' -> 'hello.world'"""
    return _join_words(text, ".")


def to_path_case(text: str) -> str:
    """'hello world' -> 'hello/world'"""
    return _join_words(text, "/")


def to_namespace_case(text: str) -> str:
    """'hello world' -> 'Hello\\World' (PHP namespace style)"""
    return "\\".join(_capitalize(word) for word in _join_words(text, "\\").split("\\"))


def to_ada_case(text: str) -> str:
    """'hello world' -> 'Hello_World'"""
    return "_".join(_capitalize(word) for word in to_snake_case(text).split("_"))


def to_cobol_case(text: str) -> str:
    """'hello world' -> 'HELLO-WORLD'"""
    return to_kebab_case(text).upper()


def to_flat_case(text: str) -> str:
    """'hello world' -> 'helloworld'"""
    return _NON_ALNUM.sub("", text).lower()


def to_upper_flat_case(text: str) -> str:
    """'hello world' -> 'HELLOWORLD'"""
    return _NON_ALNUM.sub("", text).upper()


# Checked in order; the first match wins.
_CONVENTION_PATTERNS = [
    ("camelCase", re.compile(r"^[a-z]+([A-Z][a-z]*)*$")),
    ("PascalCase", re.compile(r"^[A-Z][a-z]*([A-Z][a-z]*)*$")),
    ("snake_case", re.compile(r"^[a-z]+(_[a-z]+)*$")),
    ("SCREAMING_SNAKE_CASE", re.compile(r"^[A-Z]+(_[A-Z]+)*$")),
    ("kebab-case", re.compile(r"^[a-z]+(-[a-z]+)*$")),
    ("Train-Case", re.compile(r"^[A-Z][a-z]*(-[A-Z][a-z]*)*$")),
    ("COBOL-CASE", re.compile(r"^[A-Z]+(-[A-Z]+)*$")),
    ("dot.case", re.compile(r"^[a-z]+(\.[a-z]+)*$")),
    ("path/case", re.compile(r"^[a-z]+(/[a-z]+)*$")),
    ("Namespace\\Case", re.compile(r"^[A-Z][a-z]*(\\[A-Z][a-z]*)*$")),
    ("Ada_Case", re.compile(r"^[A-Z][a-z]*(_[A-Z][a-z]*)*$")),
]


def detect_naming_convention(text: str) -> str:
    """Name the convention ``text`` is written in, or 'unknown'."""
    for name, pattern in _CONVENTION_PATTERNS:
        if pattern.match(text):
            return name
    return "unknown"


_CONVERTERS = {
    "camelcase": to_camel_case,
    "pascalcase": to_pascal_case,
    "snakecase": to_snake_case,
    "snake_case": to_snake_case,
    "screamingsnakecase": to_screaming_snake_case,
    "screaming_snake_case": to_screaming_snake_case,
    "constantcase": to_screaming_snake_case,
    "kebabcase": to_kebab_case,
    "kebab-case": to_kebab_case,
    "traincase": to_train_case,
    "train-case": to_train_case,
    "dotcase": to_dot_case,
    "dot.case": to_dot_case,
    "pathcase": to_path_case,
    "path/case": to_path_case,
    "namespacecase": to_namespace_case,
    "adacase": to_ada_case,
    "ada_case": to_ada_case,
    "cobolcase": to_cobol_case,
    "cobol-case": to_cobol_case,
    "flatcase": to_flat_case,
    "upperflatcase": to_upper_flat_case,
}


def convert_naming_convention(text: str, target: str = "camelCase") -> str:
    """Convert from any convention to ``target``; unknown targets return the input."""
    converter = _CONVERTERS.get(target.lower())
    if converter is None:
        return text
    normalized = _LOWER_UPPER.sub(r"\1 \2", text)
    normalized = re.sub(r"[_\-./\\]+", " ", normalized).strip()
    return converter(normalized)
