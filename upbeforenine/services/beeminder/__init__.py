"""
Beeminder API 客户端
"""
from upbeforenine.services.beeminder.client import BeeminderClient
from upbeforenine.services.beeminder.errors import BeeminderAPIError

__all__ = [
    "BeeminderClient",
    "BeeminderAPIError",
]
