"""Mini README: Core package initializer for the finledger personal ledger.

The package records income and expense entries, derives a filtered and
sorted view for display, and keeps a running balance. State is mirrored to
a key-value store so it survives restarts. Sub-packages split the domain
(``finance``), persistence (``storage``) and user-facing surfaces
(``interface``).
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
