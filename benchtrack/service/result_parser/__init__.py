from pathlib import Path

from benchtrack.consts.ToolType import ToolType
from .cargo_result_parser import CargoResultParser
from .custom_result_parser import CustomResultParser
from .go_result_parser import GoResultParser
from .pytest_result_parser import PytestResultParser
from .result_parser import ResultParser


def get_parser(tool: ToolType, output_path: Path) -> ResultParser:
    if tool == ToolType.CARGO:
        return CargoResultParser(output_path)
    elif tool == ToolType.GO:
        return GoResultParser(output_path)
    elif tool == ToolType.PYTEST:
        return PytestResultParser(output_path)
    elif tool in (ToolType.CUSTOM_SMALLER_IS_BETTER, ToolType.CUSTOM_BIGGER_IS_BETTER):
        return CustomResultParser(output_path)

    raise ValueError(f"Unsupported tool type: {tool}")


__all__ = [
    "get_parser",
    "ResultParser",
    "CargoResultParser",
    "GoResultParser",
    "PytestResultParser",
    "CustomResultParser",
]
