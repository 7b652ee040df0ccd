"""
Utility functions for the EIP-712 Solidity generator.
"""

import re

# Word boundaries used when turning a type name into an upper snake case constant
_LOWER_UPPER = re.compile(r"([a-z])([A-Z])")
_UPPER_RUN = re.compile(r"([A-Z])([A-Z])(?=[a-z])")
_DIGIT_UPPER = re.compile(r"([0-9])([A-Z])")


def to_upper_snake_case(text: str) -> str:
    """Convert a PascalCase or camelCase type name to UPPER_SNAKE_CASE.

    Examples:
        "Person" -> "PERSON"
        "LivePlug" -> "LIVE_PLUG"
        "EIP712Domain" -> "EIP712_DOMAIN"
        "ERC20Permit" -> "ERC20_PERMIT"
        "HTTPRequest" -> "HTTP_REQUEST"

    Args:
        text: The type name to convert

    Returns:
        UPPER_SNAKE_CASE string
    """
    if not text:
        return ""
    text = _LOWER_UPPER.sub(r"\1_\2", text)
    text = _UPPER_RUN.sub(r"\1_\2", text)
    text = _DIGIT_UPPER.sub(r"\1_\2", text)
    return text.upper()


def upper_first(text: str) -> str:
    """Upper-case the first character and leave the rest untouched.

    Examples:
        "uint256" -> "Uint256"
        "Person" -> "Person"
        "bytes32" -> "Bytes32"
    """
    if not text:
        return ""
    return text[0].upper() + text[1:]


def join_with_and(items: list[str]) -> str:
    """Join items as an English enumeration ("a, b and c")."""
    if not items:
        return ""
    if len(items) == 1:
        return items[0]
    return ", ".join(items[:-1]) + " and " + items[-1]
