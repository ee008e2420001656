"""chronoq tool-use API: JSON-callable interface to the experiments."""

from chronoq.api.dispatch import dispatch, get_tool_definitions

__all__ = ["dispatch", "get_tool_definitions"]
