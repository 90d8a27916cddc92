from numbers import Integral
from typing import List, Sequence


def bytes_to_bitstring(data: bytes) -> str:
    """Convert bytes -> bitstring (8 bits per byte)."""
    return "".join(f"{byte:08b}" for byte in data)


def bitstring_to_bytes(bits: str) -> bytes:
    """
    Convert bitstring -> bytes.

    Length must be a multiple of 8.
    """
    if len(bits) % 8 != 0:
        raise ValueError(
            f"Bitstring length must be multiple of 8, got {len(bits)}"
        )
    return bytes(int(bits[i:i + 8], 2) for i in range(0, len(bits), 8))


def check_bitstring(bits: str) -> None:
    if not set(bits).issubset({"0", "1"}):
        raise ValueError("Expected a bitstring containing only '0' and '1'.")


def pack_bitstring(bits: str) -> bytearray:
    """
    Pack a bitstring of any length into bytes, MSB first.

    The final byte is zero-filled in its low positions.
    """
    check_bitstring(bits)
    pad = (8 - len(bits) % 8) % 8
    return bytearray(bitstring_to_bytes(bits + "0" * pad))


def _check_word_width(word_width: int) -> int:
    if isinstance(word_width, bool) or not isinstance(word_width, Integral) or word_width < 1:
        raise ValueError(f"word_width must be a positive integer, got {word_width!r}")
    return int(word_width)


def int_to_words(value: int, length: int, word_width: int) -> List[int]:
    """
    Split the `length`-bit unsigned `value` into MSB-first words.

    Every word but the last carries `word_width` bits. A trailing partial
    word carries the remaining bits in its low positions.
    """
    word_width = _check_word_width(word_width)
    full, rem = divmod(length, word_width)
    mask = (1 << word_width) - 1

    words = []
    for i in range(full):
        shift = length - (i + 1) * word_width
        words.append((value >> shift) & mask)
    if rem:
        words.append(value & ((1 << rem) - 1))
    return words


def words_to_int(words: Sequence[int], length: int, word_width: int) -> int:
    """
    Reverse of `int_to_words`.
    """
    word_width = _check_word_width(word_width)
    if length < 0:
        raise ValueError(f"length must be non-negative, got {length}")

    full, rem = divmod(length, word_width)
    expected = full + (1 if rem else 0)
    if len(words) != expected:
        raise ValueError(
            f"{length} bits at word_width={word_width} need {expected} words, got {len(words)}"
        )

    value = 0
    for i, word in enumerate(words):
        bits = rem if (rem and i == expected - 1) else word_width
        word = int(word)
        if word < 0 or word >> bits:
            raise ValueError(f"Word {i} does not fit in {bits} bits: {word}")
        value = (value << bits) | word
    return value
