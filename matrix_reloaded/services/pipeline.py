"""
Watch/serve pipeline: keeps the exported spreadsheet and the connected viewers
in sync with one decision matrix file.
"""
import asyncio
from pathlib import Path
from typing import Optional, Union

from watchfiles import Change, awatch

from matrix_reloaded.core.config import settings
from matrix_reloaded.core.exceptions import LoadError, RenderError
from matrix_reloaded.core.logfire_config import log_error, log_info, log_span
from matrix_reloaded.models.matrix import DecisionMatrix
from matrix_reloaded.services.excel_export import export_matrix_async, get_xlsx_path
from matrix_reloaded.services.loader import load_matrix_async
from matrix_reloaded.state.connections import ConnectionStore

RELOAD_MESSAGE = {"type": "reload"}


class MatrixPipeline:
    """Loads, exports and announces a single decision matrix file."""

    def __init__(
        self,
        file_path: Union[str, Path],
        connections: Optional[ConnectionStore] = None,
        xlsx_path: Optional[Union[str, Path]] = None,
    ):
        self.file_path = Path(file_path).resolve()
        self.xlsx_path = Path(xlsx_path) if xlsx_path else get_xlsx_path(self.file_path)
        self.connections = connections if connections is not None else ConnectionStore()

    async def load(self) -> DecisionMatrix:
        return await load_matrix_async(self.file_path)

    async def regenerate(self) -> bool:
        """
        One load + export pass.
        Failures are logged and reported as False; the previous export stays on disk.
        """
        with log_span("Regenerate {path}", path=str(self.file_path)):
            try:
                matrix = await self.load()
                await export_matrix_async(matrix, self.xlsx_path)
            except (LoadError, RenderError) as e:
                log_error("Failed to export XLSX", error=e, path=str(self.file_path))
                return False

        log_info("Exported", path=str(self.xlsx_path))
        return True

    async def handle_change(self, change: Change = Change.modified) -> int:
        """
        React to one change notification: regenerate, then tell every viewer to reload.
        Viewers are notified even when the pass failed. Returns the number notified.
        """
        log_info("File changed, reloading...", change=change.raw_str(), path=str(self.file_path))
        await self.regenerate()
        return await self.connections.broadcast(RELOAD_MESSAGE)

    def _is_source(self, change: Change, path: str) -> bool:
        return Path(path).resolve() == self.file_path

    async def watch(self, stop_event: Optional[asyncio.Event] = None) -> None:
        """
        Watch the file until stop_event is set.

        The parent directory is watched rather than the file itself, so the watch
        survives the file being replaced. Each distinct notification in a batch is
        handled on its own.
        """
        watch_settings = settings.watch
        log_info("Watching for changes", path=str(self.file_path))

        async for changes in awatch(
            self.file_path.parent,
            watch_filter=self._is_source,
            stop_event=stop_event,
            debounce=watch_settings.debounce_ms,
            step=watch_settings.step_ms,
            force_polling=watch_settings.force_polling,
            poll_delay_ms=watch_settings.poll_delay_ms,
            recursive=False,
        ):
            for change, _ in changes:
                # Keep watching whatever one notification does
                try:
                    await self.handle_change(change)
                except Exception as e:
                    log_error("Failed to handle file change", error=e, path=str(self.file_path))
