"""
Tokenizer for interactive shell input lines.

Splits a line on runs of spaces and tabs, honoring single and double quotes.
An open quote suppresses splitting until the same quote character recurs;
the other quote character is kept literally inside the span. Quote
characters themselves are stripped. Unterminated quotes extend to the end
of the line without raising.
"""

from cmdtree.core.types import TokenSequence

WHITESPACE = frozenset(" \t")
QUOTES = frozenset("\"'")


def tokenize(line: str) -> TokenSequence:
    """
    Split a raw input line into tokens.

    Params:
        line: The line as typed by the operator, newline already stripped

    Returns:
        Ordered list of tokens; empty when the line is blank

    Examples:
        'a "b c" d' -> ["a", "b c", "d"]
        'a "b c'    -> ["a", "b c"]
    """
    tokens: TokenSequence = []
    current: list[str] = []
    quote_char: str | None = None

    for char in line:
        if char in WHITESPACE:
            if quote_char is not None:
                current.append(char)
            elif current:
                tokens.append("".join(current))
                current = []
        elif char in QUOTES:
            if quote_char is None:
                quote_char = char
            elif char == quote_char:
                quote_char = None
            else:
                current.append(char)
        else:
            current.append(char)

    if current:
        tokens.append("".join(current))
    return tokens
