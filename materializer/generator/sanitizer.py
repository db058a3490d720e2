# materializer/generator/sanitizer.py

UNSAFE_CHARS = frozenset("<>&\"'\\")

# C isspace(); same separator set the codec splits on
WHITESPACE = frozenset(" \t\n\r\x0b\x0c")


def sanitize_prompt(prompt: str) -> str:
    """
    Replace HTML-unsafe and non-printable characters with a space.
    Output has the same length as the input, and sanitizing twice is a no-op.
    """
    return "".join(
        " " if ch in UNSAFE_CHARS or not (ch.isprintable() or ch in WHITESPACE) else ch
        for ch in prompt or ""
    )
