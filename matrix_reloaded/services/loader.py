"""
Document loader: reads a decision matrix JSON file into a DecisionMatrix.
"""
import asyncio
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from matrix_reloaded.core.exceptions import LoadError
from matrix_reloaded.models.matrix import DecisionMatrix


def load_matrix(path: Union[str, Path]) -> DecisionMatrix:
    """
    Read and parse a decision matrix file.

    Raises LoadError if the file can't be read or doesn't match the document shape.
    """
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise LoadError(path, str(e)) from e

    try:
        return DecisionMatrix.model_validate_json(content)
    except ValidationError as e:
        first = e.errors()[0]
        where = ".".join(str(part) for part in first["loc"])
        detail = f"{where}: {first['msg']}" if where else first["msg"]
        raise LoadError(path, f"{e.error_count()} validation error(s): {detail}") from e


async def load_matrix_async(path: Union[str, Path]) -> DecisionMatrix:
    """Load a matrix without blocking the event loop."""
    return await asyncio.to_thread(load_matrix, path)
