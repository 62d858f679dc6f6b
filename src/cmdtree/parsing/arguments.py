"""
Key/value argument splitting for the tokens that follow a command path.
"""

from cmdtree.core.types import ArgumentMap

from .tokenizer import QUOTES

DEFAULT_FLAG_VALUE = "true"


def strip_enclosing_quotes(value: str) -> str:
    """Remove one enclosing pair of matching quote characters, if present."""
    if len(value) >= 2 and value[0] in QUOTES and value[0] == value[-1]:
        return value[1:-1]
    return value


def parse_arguments(
    tokens: list[str], flag_value: str = DEFAULT_FLAG_VALUE
) -> ArgumentMap:
    """
    Build the key/value map from argument tokens.

    A token containing '=' is split on the first '='; the key is lower-cased
    and the value has one enclosing quote pair stripped. A token without '='
    is a bare flag whose value is flag_value. Later keys overwrite earlier ones.

    Params:
        tokens: Tokens remaining after the matched command path
        flag_value: Raw value assigned to bare flags

    Returns:
        Mapping from lower-cased key to raw string value
    """
    arguments: ArgumentMap = {}
    for token in tokens:
        if not token:
            continue
        if "=" in token:
            key, value = token.split("=", 1)
            arguments[key.lower()] = strip_enclosing_quotes(value)
        else:
            arguments[token.lower()] = flag_value
    return arguments
