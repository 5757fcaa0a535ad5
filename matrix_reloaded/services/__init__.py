from .loader import load_matrix, load_matrix_async
from .excel_export import MatrixExporter, build_workbook, export_matrix, export_matrix_async, get_xlsx_path
from .pipeline import MatrixPipeline, RELOAD_MESSAGE

__all__ = [
    "load_matrix",
    "load_matrix_async",
    "MatrixExporter",
    "build_workbook",
    "export_matrix",
    "export_matrix_async",
    "get_xlsx_path",
    "MatrixPipeline",
    "RELOAD_MESSAGE"
]
