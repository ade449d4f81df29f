# Router modules are exported here for easier access.

from . import greeting, health

__all__ = ["greeting", "health"]
