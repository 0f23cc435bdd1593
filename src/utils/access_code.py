"""Access code generation.

Access codes are short, human-shareable strings that give family members a
read-only view of one owner's schedule. They are a sharing convenience, not a
secret: uniqueness is checked against stored owners before a code is used.
"""

import secrets

from config import ACCESS_CODE_ALPHABET, ACCESS_CODE_LENGTH


def generate_code(
    length: int = ACCESS_CODE_LENGTH, alphabet: str = ACCESS_CODE_ALPHABET
) -> str:
    """Generate a random access code.

    Args:
        length: Number of characters in the code.
        alphabet: Characters to draw from, each with equal probability.

    Returns:
        A new access code. It may collide with an existing one.
    """
    return "".join(secrets.choice(alphabet) for _ in range(length))


def is_well_formed(
    code: str, length: int = ACCESS_CODE_LENGTH, alphabet: str = ACCESS_CODE_ALPHABET
) -> bool:
    """Check whether a string has the shape of an access code."""
    return len(code) == length and all(ch in alphabet for ch in code)
