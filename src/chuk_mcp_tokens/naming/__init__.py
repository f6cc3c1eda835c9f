"""
Naming - case styles and collision-free token names.
"""

from chuk_mcp_tokens.naming.case import (
    change_case,
    code_safe_variable_name,
    split_words,
    strip_leading_underscore,
)
from chuk_mcp_tokens.naming.resolver import NameResolver

__all__ = [
    "NameResolver",
    "change_case",
    "code_safe_variable_name",
    "split_words",
    "strip_leading_underscore",
]
