"""
Cryptography — Classical ciphers and letter frequencies

Caesar and Vigenère ciphers over the Latin alphabet. Case is preserved and
non-letters pass through unchanged; for Vigenère they do not consume a key
letter. Pass `decrypt=True` (or a negative Caesar shift) to reverse.
"""

import string
from typing import Final, Mapping

from fermat.core.math.exceptions import InvalidArgument
from fermat.core.math.numerical_safeguards import validate_integer

ALPHABET_SIZE: Final[int] = 26

# Relative letter frequencies in English text
ENGLISH_FREQUENCY: Final[Mapping[str, float]] = {
    "a": 0.08167, "b": 0.01492, "c": 0.02782, "d": 0.04253, "e": 0.12702,
    "f": 0.02228, "g": 0.02015, "h": 0.06094, "i": 0.06966, "j": 0.00154,
    "k": 0.00772, "l": 0.04024, "m": 0.02406, "n": 0.06749, "o": 0.07507,
    "p": 0.01929, "q": 0.00095, "r": 0.05987, "s": 0.06327, "t": 0.09056,
    "u": 0.02758, "v": 0.00978, "w": 0.02360, "x": 0.00150, "y": 0.01974,
    "z": 0.00074,
}


def _shift_letter(letter: str, shift: int) -> str:
    for alphabet in (string.ascii_lowercase, string.ascii_uppercase):
        index = alphabet.find(letter)
        if index >= 0:
            return alphabet[(index + shift) % ALPHABET_SIZE]
    return letter


# =============================================================================
# CIPHERS
# =============================================================================


def caesar_cipher(msg: str, shift: int = 0) -> str:
    """
    Shift every letter by `shift` places.

    Examples:
        >>> caesar_cipher("Hello, World!", 3)
        'Khoor, Zruog!'
    """
    k = validate_integer(shift, "shift")
    return "".join(_shift_letter(ch, k) for ch in msg)


def vigenere_cipher(msg: str, key: str, decrypt: bool = False) -> str:
    """
    Shift each letter by the next letter of `key` (a=0 .. z=25).

    Raises:
        InvalidArgument: If the key is empty or contains non-letters

    Examples:
        >>> vigenere_cipher("ATTACK AT DAWN", "lemon")
        'LXFOPV EF RNHR'
    """
    if not key or not all(ch in string.ascii_letters for ch in key):
        raise InvalidArgument(f"key must be a non-empty string of letters, got {key!r}")
    shifts = [string.ascii_lowercase.index(ch) for ch in key.lower()]
    if decrypt:
        shifts = [-s for s in shifts]

    out = []
    count = 0
    for ch in msg:
        if ch in string.ascii_letters:
            out.append(_shift_letter(ch, shifts[count % len(shifts)]))
            count += 1
        else:
            out.append(ch)
    return "".join(out)


# =============================================================================
# FREQUENCY UTILITIES
# =============================================================================


def letter_frequency(letter: str) -> float:
    """
    Relative frequency of a letter in English text (case-insensitive).

    Raises:
        InvalidArgument: If `letter` is not a single Latin letter
    """
    if len(letter) != 1 or letter.lower() not in ENGLISH_FREQUENCY:
        raise InvalidArgument(f"Expected a single letter, got {letter!r}")
    return ENGLISH_FREQUENCY[letter.lower()]


def cipher_letter_frequency(cipher: str) -> list[int]:
    """Count of each letter a..z in `cipher`, ignoring case."""
    counts = [0] * ALPHABET_SIZE
    for ch in cipher.lower():
        index = string.ascii_lowercase.find(ch)
        if index >= 0:
            counts[index] += 1
    return counts
