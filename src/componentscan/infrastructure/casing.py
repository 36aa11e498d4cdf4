"""Word-boundary case conversion.

Words split on any character that is not a letter or digit and on case
transitions: "fooBar" -> foo, Bar; "XMLHttp" -> XML, Http; "item2go" -> item, 2, go.
Letters are Unicode letters, so "über-button" keeps its "ü".
"""

import re

# Runs of letters and digits; underscore separates words
_CHUNK_PATTERN = re.compile(r"[^\W_]+")


def _is_boundary(prev: str, char: str, following: str) -> bool:
    """Check if a new word starts at char."""
    if prev.isdigit() != char.isdigit():
        return True
    if char.isupper() and not prev.isupper():
        return True
    # Last capital of an acronym starts the next word: XMLHttp -> XML, Http
    return char.isupper() and following.islower()


def _split_chunk(chunk: str) -> list[str]:
    words: list[str] = []
    start = 0
    for i in range(1, len(chunk)):
        following = chunk[i + 1] if i + 1 < len(chunk) else ""
        if _is_boundary(chunk[i - 1], chunk[i], following):
            words.append(chunk[start:i])
            start = i
    words.append(chunk[start:])
    return words


def split_words(value: str) -> list[str]:
    """Split string into words.

    Example:
        >>> split_words("my-fancy_Button2")
        ['my', 'fancy', 'Button', '2']
    """
    words: list[str] = []
    for chunk in _CHUNK_PATTERN.findall(value):
        words.extend(_split_chunk(chunk))
    return words


def to_camel_case(value: str) -> str:
    """Convert to camelCase ("foo-bar" -> "fooBar")."""
    words = split_words(value)
    if not words:
        return ""
    head, *tail = words
    return head.lower() + "".join(word.capitalize() for word in tail)


def to_pascal_case(value: str) -> str:
    """Convert to PascalCase ("foo/bar-baz" -> "FooBarBaz")."""
    camel = to_camel_case(value)
    return camel[:1].upper() + camel[1:]


def to_kebab_case(value: str) -> str:
    """Convert to kebab-case ("FooBar" -> "foo-bar")."""
    return "-".join(word.lower() for word in split_words(value))
