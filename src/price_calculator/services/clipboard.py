"""
Clipboard - Copies the summary text and tracks the "Copied!" confirmation.
"""
import time
from typing import Callable, Optional


class ClipboardError(Exception):
    """The clipboard could not be written (unavailable or permission denied)."""


class CopyConfirmation:
    """
    Boolean "copied" flag that resets itself after a fixed delay.

    The reset is evaluated lazily from the time of the last successful
    copy, so a newer copy simply restarts the window.
    """

    def __init__(self, reset_after: float = 2.0, clock: Callable[[], float] = time.monotonic):
        self.reset_after = reset_after
        self._clock = clock
        self._copied_at: Optional[float] = None

    def mark_copied(self):
        self._copied_at = self._clock()

    def mark_failed(self):
        self._copied_at = None

    @property
    def copied(self) -> bool:
        if self._copied_at is None:
            return False
        if self._clock() - self._copied_at >= self.reset_after:
            self._copied_at = None
            return False
        return True

    @property
    def remaining(self) -> float:
        """Seconds until the flag resets (0 when not set)."""
        if not self.copied:
            return 0.0
        return max(0.0, self.reset_after - (self._clock() - self._copied_at))


class ClipboardCopier:
    """Writes text verbatim through a writer callable and updates the confirmation."""

    def __init__(self, writer: Callable[[str], None], confirmation: Optional[CopyConfirmation] = None):
        self.writer = writer
        self.confirmation = confirmation or CopyConfirmation()

    def copy(self, text: str) -> bool:
        """
        Copy text to the clipboard.

        Returns True on success. A ClipboardError leaves the confirmation
        unset and is not retried.
        """
        try:
            self.writer(text)
        except ClipboardError:
            self.confirmation.mark_failed()
            return False

        self.confirmation.mark_copied()
        return True


def browser_report_writer(report: Optional[dict]) -> Callable[[str], None]:
    """
    Writer for copies performed in the browser.

    The browser does the actual write and reports back
    {"ok": bool, "error": str, "nonce": ...}; the returned writer raises
    ClipboardError unless that report confirms success.
    """
    def write(text: str):
        if not report:
            raise ClipboardError("No clipboard result from the browser")
        if not report.get('ok'):
            raise ClipboardError(report.get('error') or "Clipboard write rejected")

    return write
