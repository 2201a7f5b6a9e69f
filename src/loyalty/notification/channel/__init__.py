"""Email channel adapter registry.

``LOYALTY_EMAIL_ADAPTER`` picks the adapter: ``log`` (default) writes mail to
the application log, ``fake`` records it in memory.
"""

import os

_channel_instance = None


def get_channel():
    """Return the configured email adapter (singleton)."""
    global _channel_instance
    if _channel_instance is None:
        adapter = os.environ.get("LOYALTY_EMAIL_ADAPTER", "log")
        if adapter == "log":
            from loyalty.notification.channel.logging_email import LoggingEmailAdapter

            _channel_instance = LoggingEmailAdapter()
        elif adapter == "fake":
            from loyalty.notification.channel.fake_email import FakeEmailAdapter

            _channel_instance = FakeEmailAdapter()
        else:
            raise ValueError(f"Unknown email adapter: {adapter}")

    return _channel_instance


def reset_channel():
    """Drop the cached adapter (useful for testing)."""
    global _channel_instance
    _channel_instance = None
