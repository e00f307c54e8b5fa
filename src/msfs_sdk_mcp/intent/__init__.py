"""Free-text command parsing for the MSFS SDK MCP server."""

from .parser import INTENT_RULES, IntentParser, IntentRule

__all__ = ["INTENT_RULES", "IntentParser", "IntentRule"]
