# materializer/codec/binary_text.py
"""
Bit-token text codec.

Every byte is written as an 8 character token of '0'/'1', most significant bit
first. Tokens are separated by whitespace. Encoding joins tokens with a single
space and ends with one newline; an empty buffer encodes to "".
"""

import re

from materializer.errors import FormatError

TOKEN_BITS = 8

# same set as C isspace(): space, \t, \n, \v, \f, \r
_SEPARATORS = re.compile(r"[ \t\n\x0b\x0c\r]+")


def encode(data: bytes) -> str:
    if not data:
        return ""
    return " ".join(format(b, "08b") for b in data) + "\n"


def decode(text) -> bytes:
    """
    Decode bit-token text back to bytes.
    Accepts str or bytes. Blank input decodes to b"" (callers that need
    content check the length themselves).
    Raises FormatError on the first malformed token.
    """
    if isinstance(text, (bytes, bytearray)):
        text = bytes(text).decode("latin-1")

    out = bytearray()
    for index, token in enumerate(t for t in _SEPARATORS.split(text) if t):
        out.append(_token_to_byte(token, index))
    return bytes(out)


def _token_to_byte(token: str, index: int) -> int:
    for pos, ch in enumerate(token):
        if pos >= TOKEN_BITS:
            raise FormatError(
                f"invalid token length at token {index} (must be {TOKEN_BITS} bits)",
                token=token,
                token_index=index,
            )
        if ch not in "01":
            raise FormatError(
                f"invalid char {ch!r} in binary stream at token {index}",
                token=token,
                token_index=index,
                char=ch,
            )

    if len(token) != TOKEN_BITS:
        raise FormatError(
            f"token '{token}' is not {TOKEN_BITS} bits",
            token=token,
            token_index=index,
        )

    value = 0
    for ch in token:
        value = (value << 1) | (ch == "1")
    return value
