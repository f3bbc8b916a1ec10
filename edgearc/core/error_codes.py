"""
Structured reasons for skipped (no-op) draws and for drawn-with-warning results.
Use these keys in return values and reports; map to user-facing messages in the UI.
"""

# Known no-op keys (returned e.g. from noop_reason)
DEGENERATE_RECT = "degenerate_rect"
NON_POSITIVE_DEPTH = "non_positive_depth"

# Drawn, but with a warning
BAND_CLIPPED = "band_clipped"

# User-facing messages (short, actionable)
USER_MESSAGES: dict[str, str] = {
    DEGENERATE_RECT: "Rectangle has zero or invalid size; nothing was drawn.",
    NON_POSITIVE_DEPTH: "Arc length is zero or negative; nothing was drawn. Increase arc length or enable fill length.",
    BAND_CLIPPED: "Arc length exceeds the rectangle; the visible band is clipped to the edge. Reduce arc length or enable fill length.",
}


def user_message(error_key: str | None, fallback: str = "Nothing was drawn.") -> str:
    """Return a user-facing message for the given no-op key."""
    if not error_key:
        return fallback
    return USER_MESSAGES.get(error_key, fallback)
