"""
Error taxonomy for loading, rendering and resolving decision matrix files.
"""
from pathlib import Path
from typing import Optional, Union


class MatrixError(Exception):
    """Base class for all matrix-reloaded errors."""


class LoadError(MatrixError):
    """The source document could not be read or parsed."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Failed to load {self.path}: {reason}")


class RenderError(MatrixError):
    """The spreadsheet could not be written."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Failed to export {self.path}: {reason}")


class NoFileError(MatrixError):
    """No file was given and none was found in the decisions directory."""

    def __init__(self, decisions_dir: Optional[Union[str, Path]] = None):
        self.decisions_dir = decisions_dir
        super().__init__("No decision matrix file found.")
