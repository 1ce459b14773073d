"""
Transient status messages with cancellable auto-dismissal.

A single message is shown at a time. Each ``post()`` issues a new token, so
a dismissal scheduled for an earlier message can never clear a later one.
"""

import logging
import time
from collections.abc import Callable

from src.core.models import Notification

logger = logging.getLogger(__name__)


class NotificationCenter:
    """Holds the current notification and its pending dismissal.

    Args:
        clock: Monotonic time source in seconds. Injected by tests.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._current: Notification | None = None
        self._next_token = 0

    def post(self, message: str, dismiss_after: float | None = None) -> Notification:
        """Show *message*, replacing (and un-scheduling) any previous one.

        Args:
            message: Text to display.
            dismiss_after: Seconds until the message clears itself, or
                ``None`` to keep it until replaced or cleared.

        Returns:
            The posted notification; its ``token`` can be passed to ``expire``.
        """
        self._next_token += 1
        dismiss_at = self._clock() + dismiss_after if dismiss_after is not None else None
        self._current = Notification(message=message, token=self._next_token, dismiss_at=dismiss_at)
        logger.debug("Notification #%d posted: %s", self._next_token, message)
        return self._current

    def current(self) -> Notification | None:
        """Return the live notification, dropping it once its deadline passed."""
        note = self._current
        if note is not None and note.dismiss_at is not None and self._clock() >= note.dismiss_at:
            logger.debug("Notification #%d dismissed", note.token)
            self._current = None
        return self._current

    @property
    def message(self) -> str | None:
        note = self.current()
        return note.message if note else None

    def expire(self, token: int) -> bool:
        """Clear the notification if *token* is still the current one.

        Returns:
            True when a message was cleared, False for a stale token.
        """
        if self._current is None or self._current.token != token:
            return False
        self._current = None
        return True

    def clear(self) -> None:
        self._current = None
