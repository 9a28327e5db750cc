"""Display state shared by the terminal views."""

# SPDX-License-Identifier: MIT

from contextvars import ContextVar

# Context variable for controlling header visibility above task tables
# Default is True (show headers)
_show_header_var: ContextVar[bool] = ContextVar("show_header", default=True)


def set_show_header(value: bool) -> None:
    """Set whether the header should be displayed above task tables.

    Args:
        value: True to show the header, False to hide it
    """
    _show_header_var.set(value)


def get_show_header() -> bool:
    return _show_header_var.get()
