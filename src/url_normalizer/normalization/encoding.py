"""
Percent-encoding canonicalization.

Makes encodings canonical without changing the referenced resource:
- hex digits of percent-encoded octets are upper-cased ('%2f' -> '%2F')
- octets encoding RFC 3986 unreserved characters are decoded ('%7E' -> '~')

Everything else stays encoded; decoding a reserved character such as '/'
could change the meaning of the URI. Malformed sequences ('%' not followed
by two hex digits) are passed through untouched.
"""

import re
import string

from url_normalizer.config import DEFAULT_CONTEXT, NormalizationContext

_PERCENT_ENCODED_REGEX = re.compile(r"%([0-9A-Fa-f]{2})")

UNRESERVED_CHARACTERS = frozenset(string.ascii_letters + string.digits + "-._~")

# Sub-delimiters plus ':' and '@' are legal unencoded in a path segment
PATH_SPECIAL_CHARACTERS = frozenset("!$&'()*+,;=:@")


def _decode_octets(text: str, decodable: frozenset) -> str:
    def _decode(match: re.Match) -> str:
        char = chr(int(match.group(1), 16))
        return char if char in decodable else match.group(0)

    return _PERCENT_ENCODED_REGEX.sub(_decode, text)


def upper_case_percent_encoding(text: str) -> str:
    """Upper-case the hex digits of every percent-encoded octet."""
    return _PERCENT_ENCODED_REGEX.sub(lambda m: f"%{m.group(1).upper()}", text)


def decode_unreserved(text: str) -> str:
    """
    Decode percent-encoded unreserved characters (A-Z a-z 0-9 - . _ ~).

    Args:
        text: Raw URI component

    Returns:
        Component with only unreserved octets decoded

    Example:
        >>> decode_unreserved("/foo%2Dbar%7e")
        '/foo-bar~'
        >>> decode_unreserved("/foo%2Fbar")
        '/foo%2Fbar'
    """
    return _decode_octets(text, UNRESERVED_CHARACTERS)


def decode_special_characters(text: str) -> str:
    """Decode unreserved characters plus those legal unencoded in a path segment."""
    return _decode_octets(text, UNRESERVED_CHARACTERS | PATH_SPECIAL_CHARACTERS)


def normalize_percent_encoding(
    text: str, context: NormalizationContext = DEFAULT_CONTEXT
) -> str:
    """Apply the percent-encoding options of a context to a path."""
    if context.upper_case_percent_encoding:
        text = upper_case_percent_encoding(text)
    if context.decode_special_characters:
        text = decode_special_characters(text)
    elif context.decode_unreserved_characters:
        text = decode_unreserved(text)
    return text
