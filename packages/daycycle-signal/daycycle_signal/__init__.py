"""daycycle-signal - Broadcast channel announcing time event firings."""
from __future__ import annotations

from daycycle_signal.channel import NotificationChannel

__all__ = ["NotificationChannel"]
