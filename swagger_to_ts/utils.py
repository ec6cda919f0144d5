"""
Identifier helpers for the Swagger to TypeScript generator.
"""

import re
import unicodedata

# A run of separators followed by one word character, e.g. "_n" or "-.x"
_SEPARATOR_PATTERN = re.compile(r"(-|_|\.|\s)+\w", re.ASCII)
_NON_ALNUM_PATTERN = re.compile(r"[^0-9a-z]", re.IGNORECASE)


def strip_dots(name: str) -> str:
    """Remove every "." from a definition name ("pet.Owner" -> "petOwner")."""
    return name.replace(".", "")


def camel_case(name: str) -> str:
    """Convert kebab-case, snake_case, dotted.case or spaced text to camelCase.

    Only the letter after each separator run is uppercased, the first
    character is left alone.

    Examples:
        "first_name" -> "firstName"
        "x-rate-limit" -> "xRateLimit"
        "pet.owner" -> "petOwner"
        "Pet" -> "Pet"
    """
    return _SEPARATOR_PATTERN.sub(lambda m: _NON_ALNUM_PATTERN.sub("", m.group(0).upper()), name)


def capitalize(text: str) -> str:
    """Uppercase the first character only ("petOwner" -> "PetOwner")."""
    if not text:
        return ""
    return text[0].upper() + text[1:]


def quote_key(key: str) -> str:
    """Wrap a property key in single quotes when it is not a plain identifier."""
    return f"'{key}'" if "-" in key else key


def _primary_weight(char: str) -> tuple[int, str]:
    # Punctuation and symbols sort before digits, digits before letters
    if char.isalpha():
        group = 2
    elif char.isdigit():
        group = 1
    else:
        group = 0
    return group, char.casefold()


def collation_key(name: str) -> tuple[list[tuple[int, str]], str]:
    """Sort key that orders names the way a locale-aware comparison does.

    Letters compare case- and accent-insensitively first; only names that
    tie on that are ordered by case, lowercase first ("pet" < "Pet").

    Examples:
        sorted(["apple", "Banana", "aCherry"], key=collation_key)
        -> ["aCherry", "apple", "Banana"]
    """
    decomposed = unicodedata.normalize("NFD", name)
    base = [_primary_weight(char) for char in decomposed if not unicodedata.combining(char)]
    return base, name.swapcase()
