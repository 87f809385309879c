"""Card themes and colour resolution."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from PIL import ImageColor

logger = logging.getLogger(__name__)

DEFAULT_THEME_NAME = "default_repocard"

# Colours used when neither an override nor the theme provides a value.
DEFAULT_COLORS = {
    "title_color": "000",
    "icon_color": "000",
    "text_color": "000",
    "bg_color": "fff",
    "border_color": "e4e2e2",
}

THEMES: dict[str, dict[str, str]] = {
    "default": {
        "title_color": "2f80ed",
        "icon_color": "4c71f2",
        "text_color": "434d58",
        "bg_color": "fffefe",
        "border_color": "e4e2e2",
    },
    "default_repocard": {
        "title_color": "000",
        "icon_color": "000",
        "text_color": "000",
        "bg_color": "fff",
    },
    "transparent": {
        "title_color": "006aff",
        "icon_color": "0579c3",
        "text_color": "417e87",
        "bg_color": "ffffff00",
    },
    "dark": {
        "title_color": "fff",
        "icon_color": "79ff97",
        "text_color": "9f9f9f",
        "bg_color": "151515",
    },
    "radical": {
        "title_color": "fe428e",
        "icon_color": "f8d847",
        "text_color": "a9fef7",
        "bg_color": "141321",
    },
    "merko": {
        "title_color": "abd200",
        "icon_color": "b7d364",
        "text_color": "68b587",
        "bg_color": "0a0f0b",
    },
    "gruvbox": {
        "title_color": "fabd2f",
        "icon_color": "fe8019",
        "text_color": "8ec07c",
        "bg_color": "282828",
    },
    "tokyonight": {
        "title_color": "70a5fd",
        "icon_color": "bf91f3",
        "text_color": "38bdae",
        "bg_color": "1a1b27",
    },
    "onedark": {
        "title_color": "e4bf7a",
        "icon_color": "8eb573",
        "text_color": "df6d74",
        "bg_color": "282c34",
    },
    "cobalt": {
        "title_color": "e683d9",
        "icon_color": "0480ef",
        "text_color": "75eeb2",
        "bg_color": "193549",
    },
    "synthwave": {
        "title_color": "e2e9ec",
        "icon_color": "ef8539",
        "text_color": "e5289e",
        "bg_color": "2b213a",
    },
    "highcontrast": {
        "title_color": "e7f216",
        "icon_color": "00ffff",
        "text_color": "fff",
        "bg_color": "000",
    },
    "dracula": {
        "title_color": "ff6e96",
        "icon_color": "79dafa",
        "text_color": "f8f8f2",
        "bg_color": "282a36",
    },
    "github_dark": {
        "title_color": "58a6ff",
        "icon_color": "1f6feb",
        "text_color": "c9d1d9",
        "bg_color": "0d1117",
        "border_color": "30363d",
    },
}


@dataclass(frozen=True)
class CardColors:
    title_color: str
    icon_color: str
    text_color: str
    bg_color: str
    border_color: str


def list_themes(themes: Mapping[str, Mapping[str, str]] = THEMES) -> list[str]:
    return sorted(themes.keys())


def is_valid_hex_color(value: str | None) -> bool:
    """Check for a 3, 4, 6 or 8 digit hex colour, with or without ``#``."""
    if not value or not isinstance(value, str):
        return False
    try:
        ImageColor.getrgb(f"#{value.lstrip('#')}")
    except ValueError:
        return False
    return True


def _pick(field: str, override: str | None, theme: Mapping[str, str], fallback: Mapping[str, str]) -> str:
    if override is not None:
        if is_valid_hex_color(override):
            return f"#{override.lstrip('#')}"
        logger.warning("Ignoring invalid %s %r", field, override)

    for source in (theme, fallback, DEFAULT_COLORS):
        value = source.get(field)
        if is_valid_hex_color(value):
            return f"#{value.lstrip('#')}"

    return f"#{DEFAULT_COLORS[field]}"


def get_card_colors(
    title_color: str | None = None,
    icon_color: str | None = None,
    text_color: str | None = None,
    bg_color: str | None = None,
    border_color: str | None = None,
    theme: str | None = DEFAULT_THEME_NAME,
    themes: Mapping[str, Mapping[str, str]] = THEMES,
) -> CardColors:
    """
    Resolve the final colours for one card.

    Each field takes the explicit override when it is a valid hex colour, then
    the named theme's value, then the hard-coded default. Unknown theme names
    fall back to the default theme.

    Args:
        title_color, icon_color, text_color, bg_color, border_color: Optional
            overrides, hex with or without a leading ``#``.
        theme: Theme name to look up in ``themes``.
        themes: Theme table; defaults to the built-in ``THEMES``.
    """
    fallback = themes.get(DEFAULT_THEME_NAME, DEFAULT_COLORS)
    selected = themes.get(theme or DEFAULT_THEME_NAME)
    if selected is None:
        logger.warning("Unknown theme %r, using %s", theme, DEFAULT_THEME_NAME)
        selected = fallback

    return CardColors(
        title_color=_pick("title_color", title_color, selected, fallback),
        icon_color=_pick("icon_color", icon_color, selected, fallback),
        text_color=_pick("text_color", text_color, selected, fallback),
        bg_color=_pick("bg_color", bg_color, selected, fallback),
        border_color=_pick("border_color", border_color, selected, fallback),
    )
