"""
Suite configuration data class.

This module provides the Suite class describing one named benchmark suite:
which harness produces it and where its raw output is read from.
"""

from dataclasses import dataclass
from typing import Optional

from benchtrack.consts.ToolType import ToolType


@dataclass
class Suite:

    name: str
    tool: ToolType
    output_file: Optional[str] = None
