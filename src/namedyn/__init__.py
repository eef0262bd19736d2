"""namedyn - keep a name.com A record pointed at your public IP."""

from namedyn.config import Settings, load_settings
from namedyn.reconciler import Reconciler, reconcile_once

__all__ = ["Reconciler", "Settings", "load_settings", "reconcile_once"]
__version__ = "0.1.0"
