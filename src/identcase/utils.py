"""Debug output helpers for identcase."""

import datetime
import sys


class DebugContext:
    """Context manager for debug output"""

    def __init__(self, enabled=False):
        """Initialize debug context with optional enabled state."""
        self.enabled = enabled

    def print(self, *args, **kwargs):
        """Print debug messages with [DEBUG] prefix and timestamp when enabled"""
        if self.enabled:
            timestamp = datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
            debug_prefix = f"[DEBUG] {timestamp}"

            if args:
                first_arg = f"{debug_prefix} {args[0]}"
                remaining_args = args[1:]
                print(first_arg, *remaining_args, file=sys.stderr, **kwargs)
            else:
                print(debug_prefix, file=sys.stderr, **kwargs)

    def enable(self):
        """Enable debug output"""
        self.enabled = True

    def disable(self):
        """Disable debug output"""
        self.enabled = False


# Global debug context
_debug_context = DebugContext()


def debug_print(*args, **kwargs):
    """Print debug messages with [DEBUG] prefix and timestamp when debug mode is enabled"""
    _debug_context.print(*args, **kwargs)


def set_debug_enabled(value):
    """Set debug mode on or off"""
    if value:
        _debug_context.enable()
    else:
        _debug_context.disable()


class _DebugEnabled:
    """Truthy view of the current debug state for module-level access"""

    def __bool__(self):
        return _debug_context.enabled

    def __eq__(self, other):
        return _debug_context.enabled == other

    def __repr__(self):
        return str(_debug_context.enabled)


debug_enabled = _DebugEnabled()


def preview(text, limit=60):
    """Shorten text for debug output"""
    if not isinstance(text, str):
        return repr(text)
    if len(text) > limit:
        return repr(text[: limit - 3] + "...")
    return repr(text)
