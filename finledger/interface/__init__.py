"""Mini README: User-facing surfaces for finledger.

Exports the ledger view-model with its display port, and the FastAPI
application factory that powers the browser page. The terminal display
used by the CLI lives in ``console``.
"""

from .display import LedgerDisplay, RecordingDisplay, Theme
from .view_model import LedgerViewModel
from .web_app import create_application

__all__ = [
    "LedgerDisplay",
    "LedgerViewModel",
    "RecordingDisplay",
    "Theme",
    "create_application",
]
