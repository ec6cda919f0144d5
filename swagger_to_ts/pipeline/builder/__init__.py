"""
Builder module.

Contains the declaration worklist and the declaration builder.
"""

from __future__ import annotations

from .declaration_builder import DeclarationBuilder, Member
from .worklist import DeclarationStack, WorklistEntry

__all__ = [
    "DeclarationBuilder",
    "DeclarationStack",
    "Member",
    "WorklistEntry",
]
