from .matrix import Decision, Option, Cell, Criterion, DecisionMatrix, CellColor, RECOGNIZED_COLORS

__all__ = [
    "Decision", "Option", "Cell", "Criterion", "DecisionMatrix",
    "CellColor", "RECOGNIZED_COLORS"
]
