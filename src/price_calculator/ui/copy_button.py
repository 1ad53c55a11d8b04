"""
Copy button component.

The button lives inside the component iframe so the clipboard write runs
in the user's click. The promise result is sent back to Python as
{"ok": bool, "error": str, "nonce": int}; a new nonce marks a new click.
"""
from pathlib import Path
from typing import Optional

import streamlit.components.v1 as components


_FRONTEND_DIR = Path(__file__).parent / 'frontend' / 'copy_button'

_copy_button = components.declare_component("copy_button", path=str(_FRONTEND_DIR))


def copy_button(
    text: str,
    label: str,
    copied_label: str,
    copied: bool,
    reset_after: float,
    remaining: float,
    key: str
) -> Optional[dict]:
    """
    Render the copy button and return the latest browser report (or None).

    Args:
        text: Exact text written to the clipboard on click
        copied: Whether the confirmation is currently shown
        reset_after: Seconds a fresh confirmation stays visible
        remaining: Seconds left on the current confirmation
    """
    return _copy_button(
        text=text,
        label=label,
        copied_label=copied_label,
        copied=copied,
        reset_after_ms=int(reset_after * 1000),
        remaining_ms=int(remaining * 1000),
        key=key,
        default=None,
    )
