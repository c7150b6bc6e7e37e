"""File-system sink for exported documents."""

from pathlib import Path

from src.application.ports.export_sink import ExportSinkPort
from src.domain.models.ledger import Document


class FileExportSink(ExportSinkPort):
    """Write documents into a directory, overwriting same-name files."""

    def __init__(self, directory: Path, logger=None) -> None:
        self._directory = Path(directory)
        self._logger = logger

    def deliver(self, document: Document) -> str:
        """Write the document and return its absolute path."""
        self._directory.mkdir(parents=True, exist_ok=True)
        target = self._directory / Path(document.filename).name
        target.write_bytes(document.content)
        if self._logger is not None:
            self._logger.info(
                f"Wrote {len(document.content)} bytes to {target}"
            )
        return str(target.resolve())


__all__ = ["FileExportSink"]
