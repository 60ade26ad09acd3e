from enum import Enum


class ToolType(Enum):
    CARGO = "cargo"
    GO = "go"
    PYTEST = "pytest"
    CUSTOM_SMALLER_IS_BETTER = "customSmallerIsBetter"
    CUSTOM_BIGGER_IS_BETTER = "customBiggerIsBetter"

    @property
    def bigger_is_better(self) -> bool:
        # cargo and go report time per iteration, pytest-benchmark reports ops/sec
        return self in (ToolType.PYTEST, ToolType.CUSTOM_BIGGER_IS_BETTER)
