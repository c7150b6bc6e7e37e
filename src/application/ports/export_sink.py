"""Port for delivering exported documents."""

from typing import Protocol

from src.domain.models.ledger import Document


class ExportSinkPort(Protocol):
    """Port receiving finished documents."""

    def deliver(self, document: Document) -> str:
        """Store or send the document and return where it went."""


__all__ = ["ExportSinkPort"]
