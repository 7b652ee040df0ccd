"""
Baseline schema shared by every generated contract.
"""

from __future__ import annotations

BASELINE_TYPES: dict[str, list[dict[str, str]]] = {
    "EIP712Domain": [
        {"name": "name", "type": "string"},
        {"name": "version", "type": "string"},
        {"name": "chainId", "type": "uint256"},
        {"name": "verifyingContract", "type": "address"},
    ],
}

# The type used to build the domain separator in the generated constructor
DOMAIN_TYPE = "EIP712Domain"
