"""
Excel exporter for decision matrices.

Lays the matrix out as one sheet:
- Row 1: decision statement, then one column per option label
- Row 2: decision description, then each option's description
- One row per criterion, with the assessment text for each option

Assessment cells are tinted by their color (red / yellow / green); cells
without a recognized color keep the sheet default.
"""
import asyncio
import os
import tempfile
from pathlib import Path
from typing import Optional, Union

from openpyxl import Workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter

from matrix_reloaded.core.config import settings
from matrix_reloaded.core.exceptions import RenderError
from matrix_reloaded.models.matrix import DecisionMatrix

SOURCE_SUFFIX = ".json"
XLSX_SUFFIX = ".xlsx"


def get_xlsx_path(source_path: Union[str, Path]) -> Path:
    """Swap a .json extension for .xlsx, or append .xlsx when there is none."""
    source_path = Path(source_path)
    if source_path.suffix.lower() == SOURCE_SUFFIX:
        return source_path.with_suffix(XLSX_SUFFIX)
    return source_path.with_name(source_path.name + XLSX_SUFFIX)


def _solid(color: str) -> PatternFill:
    return PatternFill(start_color=color, end_color=color, fill_type="solid")


class MatrixStyles:
    """Styles used by the exporter, built once from the export settings."""

    def __init__(self, export=None):
        export = export or settings.export
        side = Side(style="thin", color=export.border)

        self.border = Border(left=side, right=side, top=side, bottom=side)
        self.wrap = Alignment(vertical="top", wrap_text=True)
        self.wrap_centered = Alignment(horizontal="center", vertical="top", wrap_text=True)

        self.header_font = Font(bold=True, color=export.header_font)
        self.decision_fill = _solid(export.decision_fill)
        self.option_fill = _solid(export.option_fill)

        self.decision_description_font = Font(italic=True)
        self.decision_description_fill = _solid(export.decision_description_fill)
        self.option_description_fill = _solid(export.option_description_fill)

        self.criteria_font = Font(bold=True)
        self.criteria_fill = _solid(export.criteria_fill)

        self.cell_fills = {name: _solid(color) for name, color in export.cell_fills.items()}

    def fill_for(self, color: Optional[str]) -> Optional[PatternFill]:
        if color is None:
            return None
        return self.cell_fills.get(color)


class MatrixExporter:
    """
    Export a DecisionMatrix to an Excel workbook.

    The output depends only on the matrix, so exporting the same document twice
    gives identical cells and styles (workbook timestamps aside).
    """

    def __init__(self, export=None):
        self.config = export or settings.export
        self.styles = MatrixStyles(self.config)

    def build_workbook(self, matrix: DecisionMatrix) -> Workbook:
        wb = Workbook()
        ws = wb.active
        ws.title = self.config.sheet_title

        self._write_header(ws, matrix)
        self._write_descriptions(ws, matrix)
        for offset, criterion in enumerate(matrix.criteria):
            self._write_criterion(ws, 3 + offset, matrix, criterion)

        ws.column_dimensions["A"].width = self.config.criteria_column_width
        for col in range(2, len(matrix.options) + 2):
            ws.column_dimensions[get_column_letter(col)].width = self.config.option_column_width

        return wb

    def export(self, matrix: DecisionMatrix, output_path: Union[str, Path]) -> Path:
        """
        Write the matrix to output_path, replacing any existing file.

        The workbook is saved to a temporary file next to the target and moved
        into place, so a failed write never leaves a half-written spreadsheet.
        """
        output_path = Path(output_path)
        wb = self.build_workbook(matrix)

        tmp_name = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{output_path.stem}.", suffix=XLSX_SUFFIX, dir=output_path.parent
            )
            os.close(fd)
            wb.save(tmp_name)
            os.replace(tmp_name, output_path)
        except OSError as e:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise RenderError(output_path, str(e)) from e

        return output_path

    def _write_cell(self, ws, row: int, col: int, value: str, font=None, fill=None, alignment=None):
        # Control characters are valid JSON but openpyxl refuses to store them
        cell = ws.cell(row=row, column=col, value=ILLEGAL_CHARACTERS_RE.sub("", value))
        cell.alignment = alignment or self.styles.wrap
        cell.border = self.styles.border
        if font is not None:
            cell.font = font
        if fill is not None:
            cell.fill = fill
        return cell

    def _write_header(self, ws, matrix: DecisionMatrix):
        self._write_cell(
            ws, 1, 1, matrix.decision.statement,
            font=self.styles.header_font, fill=self.styles.decision_fill,
        )
        for col, option in enumerate(matrix.options, start=2):
            self._write_cell(
                ws, 1, col, option.label,
                font=self.styles.header_font,
                fill=self.styles.option_fill,
                alignment=self.styles.wrap_centered,
            )

    def _write_descriptions(self, ws, matrix: DecisionMatrix):
        self._write_cell(
            ws, 2, 1, matrix.decision.description,
            font=self.styles.decision_description_font,
            fill=self.styles.decision_description_fill,
        )
        for col, option in enumerate(matrix.options, start=2):
            self._write_cell(ws, 2, col, option.description, fill=self.styles.option_description_fill)

    def _write_criterion(self, ws, row: int, matrix: DecisionMatrix, criterion):
        self._write_cell(
            ws, row, 1, criterion.name,
            font=self.styles.criteria_font, fill=self.styles.criteria_fill,
        )
        # Lookup is per option, so cells keyed by unknown labels never show up.
        for col, option in enumerate(matrix.options, start=2):
            cell = matrix.cell_for(criterion, option.label)
            self._write_cell(
                ws, row, col, cell.text,
                fill=self.styles.fill_for(cell.recognized_color),
            )


# Default exporter instance
matrix_exporter = MatrixExporter()


def build_workbook(matrix: DecisionMatrix) -> Workbook:
    return matrix_exporter.build_workbook(matrix)


def export_matrix(matrix: DecisionMatrix, output_path: Union[str, Path]) -> Path:
    return matrix_exporter.export(matrix, output_path)


async def export_matrix_async(matrix: DecisionMatrix, output_path: Union[str, Path]) -> Path:
    """Export without blocking the event loop."""
    return await asyncio.to_thread(export_matrix, matrix, output_path)
