from pydantic import BaseModel
from typing import Optional, Literal, Dict, List


CellColor = Literal['red', 'yellow', 'green']

RECOGNIZED_COLORS = ('red', 'yellow', 'green')


class Decision(BaseModel):
    statement: str
    description: str


class Option(BaseModel):
    label: str
    description: str


class Cell(BaseModel):
    text: str
    # Any string loads; only RECOGNIZED_COLORS are styled, the rest render neutral.
    color: Optional[str] = None

    @property
    def recognized_color(self) -> Optional[CellColor]:
        if self.color in RECOGNIZED_COLORS:
            return self.color
        return None


class Criterion(BaseModel):
    name: str
    cells: Dict[str, Cell]  # keyed by option label


class DecisionMatrix(BaseModel):
    """A decision, the options being compared, and one row of assessments per criterion."""
    decision: Decision
    options: List[Option]
    criteria: List[Criterion]

    def cell_for(self, criterion: Criterion, label: str) -> Cell:
        """Cell for an option label, or an empty neutral cell if the criterion has none."""
        cell = criterion.cells.get(label)
        return cell if cell is not None else Cell(text="")
