"""
dtheader.commands - CLI command implementations
"""

__all__ = [
    "parse_cmd",
    "validate",
    "versions_cmd",
]
