"""Text helpers shared by the tokenizers."""

# Characters stripped at token boundaries (ASCII whitespace and controls)
ASCII_WHITESPACE = "".join(chr(c) for c in range(0x21))


def trim(text: str) -> str:
    """Strip leading and trailing ASCII whitespace and control characters."""
    return text.strip(ASCII_WHITESPACE)
