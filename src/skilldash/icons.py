from __future__ import annotations

ICON_SYMBOLS: dict[str, str] = {
    "book": "menu_book",
    "target": "track_changes",
    "trending_up": "trending_up",
    "bar_chart": "bar_chart",
    "user": "person",
}


def icon_token(name: str) -> str:
    """Return the Streamlit Material Symbols shortcode for a logical glyph name."""
    if name not in ICON_SYMBOLS:
        raise ValueError(f"Unknown icon: {name}")
    return f":material/{ICON_SYMBOLS[name]}:"
