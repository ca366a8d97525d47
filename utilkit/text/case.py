"""
Case conversion helpers.

Every word-based converter goes through split_words, which breaks text on
whitespace, hyphens, underscores and camelCase/PascalCase boundaries
(including acronym runs such as "HTMLParser" -> "HTML", "Parser").
"""

import re
from typing import List

_SEPARATORS = re.compile(r'[\s_\-]+')
_LOWER_TO_UPPER = re.compile(r'([a-z0-9])([A-Z])')
_ACRONYM_TO_WORD = re.compile(r'([A-Z]+)([A-Z][a-z])')


def split_words(text: str) -> List[str]:
    """Split text into words on separators and camel-case boundaries."""
    words = []
    for part in _SEPARATORS.split(text):
        if not part:
            continue
        part = _ACRONYM_TO_WORD.sub(r'\1 \2', part)
        part = _LOWER_TO_UPPER.sub(r'\1 \2', part)
        words.extend(part.split())
    return words


def _upper_first(word: str) -> str:
    return word[:1].upper() + word[1:]


def to_camel_case(text: str) -> str:
    """
    Convert text to camelCase.

    Example:
        >>> to_camel_case("hello world")
        'helloWorld'
    """
    words = [word.lower() for word in split_words(text)]
    if not words:
        return ""
    return words[0] + ''.join(_upper_first(word) for word in words[1:])


def to_pascal_case(text: str) -> str:
    """Convert text to PascalCase ("hello world" -> "HelloWorld")."""
    return ''.join(_upper_first(word.lower()) for word in split_words(text))


def to_snake_case(text: str) -> str:
    """Convert text to snake_case ("myVariableName" -> "my_variable_name")."""
    return '_'.join(word.lower() for word in split_words(text))


def to_kebab_case(text: str) -> str:
    """Convert text to kebab-case ("my_var_name" -> "my-var-name")."""
    return '-'.join(word.lower() for word in split_words(text))


def to_constant_case(text: str) -> str:
    """Convert text to CONSTANT_CASE, built on to_snake_case."""
    return to_snake_case(text).upper()


def to_title_case(text: str) -> str:
    """
    Capitalize every whitespace-separated word and join with single spaces.

    Only whitespace separates words here, so "hello-world" stays one word.
    """
    return ' '.join(_upper_first(word) for word in text.lower().split())


def to_sentence_case(text: str) -> str:
    """Lowercase the whole text, then uppercase its first character."""
    return _upper_first(text.lower())


def toggle_case(text: str) -> str:
    """Swap the case of every character ("Hello" -> "hELLO")."""
    return text.swapcase()


def capitalize(text: str) -> str:
    """Uppercase the first character and lowercase the rest."""
    return text[:1].upper() + text[1:].lower()
