"""Email adapter registry.

Uses the fake adapter by default; a real adapter (SMTP, SendGrid) can be
selected with EMAIL_ADAPTER once one is wired in.
"""

import os

from checkout.notification.email_port import EmailPort

_email_sender: EmailPort | None = None


def get_email_sender() -> EmailPort:
    """Return the configured email adapter (singleton)."""
    global _email_sender
    if _email_sender is None:
        adapter = os.environ.get("EMAIL_ADAPTER", "fake")
        if adapter == "fake":
            from checkout.notification.fake_email import FakeEmailAdapter

            _email_sender = FakeEmailAdapter()
        else:
            raise ValueError(f"Unknown email adapter: {adapter}")
    return _email_sender


def set_email_sender(sender: EmailPort) -> None:
    global _email_sender
    _email_sender = sender


def reset_email_sender() -> None:
    """Reset the email singleton (useful for testing)."""
    global _email_sender
    _email_sender = None
