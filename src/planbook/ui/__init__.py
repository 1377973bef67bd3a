"""Terminal display helpers for the planbook CLI."""

from planbook.ui.formatting import (
    create_ready_table,
    create_tools_table,
    format_tool_for_display,
)

__all__ = ["create_ready_table", "create_tools_table", "format_tool_for_display"]
