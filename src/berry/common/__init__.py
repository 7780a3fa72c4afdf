from pathlib import Path

from berry.needle import needle
from .messaging.bus import bus
from .transaction import TransactionManager

# Packaged message catalogs are the lowest-priority root.
needle.add_root(Path(__file__).parent / "assets")

__all__ = ["bus", "needle", "TransactionManager"]
