"""Application ports package."""

from .database import DatabaseEnginePort
from .export_sink import ExportSinkPort
from .fx_store import FxStorePort
from .transaction_store import TransactionStorePort

__all__ = [
    "DatabaseEnginePort",
    "ExportSinkPort",
    "FxStorePort",
    "TransactionStorePort",
]
