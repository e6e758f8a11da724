"""String helpers used to parse command lines and environment values."""

from __future__ import annotations

_WHITESPACE = " \t\n\v\f\r"


def _require_char(char: str) -> str:
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return char


def _require_non_negative(name: str, value: int) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def parse_int(text: str) -> int:
    """Parse a leading decimal integer, ignoring leading whitespace.

    Parsing stops at the first character that is not a digit; text with
    no digits yields 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for ch in rest:
        if not ("0" <= ch <= "9"):
            break
        digits.append(ch)
    if not digits:
        return 0
    return sign * int("".join(digits))


def format_int(value: int) -> str:
    """Render an integer in decimal, with a leading '-' when negative."""
    return f"{int(value):d}"


def count_words(text: str, sep: str) -> int:
    """Count the non-empty runs of text between separator characters."""
    return len(split_words(text, sep))


def split_words(text: str, sep: str) -> list[str]:
    """Split text on a single separator character, dropping empty pieces."""
    _require_char(sep)
    return [word for word in text.split(sep) if word]


def trim(text: str, chars: str) -> str:
    """Remove every character found in chars from both ends of text."""
    return text.strip(chars)


def substring(text: str, start: int, length: int) -> str:
    """Return at most length characters of text beginning at start.

    A start past the end of text yields an empty string.
    """
    _require_non_negative("start", start)
    _require_non_negative("length", length)
    if start > len(text):
        return ""
    return text[start:start + length]


def find_within(haystack: str, needle: str, limit: int) -> int | None:
    """Find needle in the first limit characters of haystack.

    Returns the index of the first occurrence that lies entirely within
    the limit, 0 for an empty needle, or None when there is none.
    """
    _require_non_negative("limit", limit)
    if not needle:
        return 0
    index = haystack.find(needle, 0, limit)
    return None if index < 0 else index


def compare_prefix(first: str, second: str, limit: int) -> int:
    """Compare at most limit characters of two strings.

    Returns the difference of the code points at the first mismatch, with
    the end of a string counting as code point 0, or 0 when they agree.
    """
    _require_non_negative("limit", limit)
    a = first[:limit]
    b = second[:limit]
    for left, right in zip(a, b):
        if left != right:
            return ord(left) - ord(right)
    if len(a) == len(b):
        return 0
    if len(a) < len(b):
        return -ord(b[len(a)])
    return ord(a[len(b)])


def find_char(text: str, char: str) -> int | None:
    """Index of the first occurrence of char in text, or None.

    Searching for the NUL character yields the length of text.
    """
    _require_char(char)
    if char == "\0":
        return len(text)
    index = text.find(char)
    return None if index < 0 else index


def rfind_char(text: str, char: str) -> int | None:
    """Index of the last occurrence of char in text, or None.

    Searching for the NUL character yields the length of text.
    """
    _require_char(char)
    if char == "\0":
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def bounded_copy(src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of size slots, one kept for the terminator.

    Returns the copied text and the full length of src, so truncation
    happened when the length is at least size.
    """
    _require_non_negative("size", size)
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def bounded_concat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dest within a buffer of size slots.

    Returns the resulting text and the length the full result would have
    had; when size does not exceed len(dest), dest is left unchanged and
    the length reported is size + len(src).
    """
    _require_non_negative("size", size)
    dest_len = len(dest)
    src_len = len(src)
    if size <= dest_len:
        return dest, size + src_len
    room = size - dest_len - 1
    return dest + src[:room], dest_len + src_len