"""Repository card: input models and the renderer that assembles the SVG."""

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

from markupsafe import Markup

import card_templates
from card_colors import DEFAULT_THEME_NAME, CardColors, get_card_colors
from card_i18n import I18n
from card_icons import get_icon
from card_layout import flex_layout, icon_with_label
from card_shell import Card
from card_text import (
    clamp_value,
    encode_html,
    k_formatter,
    normalize_description,
    truncate_title,
    wrap_text_multiline,
)

logger = logging.getLogger(__name__)

CARD_WIDTH = 400
ICON_SIZE = 16
DESCRIPTION_LINE_WIDTH = 59
DESCRIPTION_MIN_LINES = 1
DESCRIPTION_MAX_LINES = 3
LINE_HEIGHT = 10
HEIGHT_BASE = 120
HEIGHT_TRAILING_MARGIN = 50
STATS_BOTTOM_OFFSET = 75
STATS_GAP = 25
TITLE_MAX_CHARS = 35


class CardValidationError(ValueError):
    """Raised when card input is structurally invalid."""


@dataclass(frozen=True)
class PrimaryLanguage:
    name: str
    color: str | None = None


@dataclass(frozen=True)
class RepositorySummary:
    """Already-fetched repository data shown on the card."""

    name: str
    name_with_owner: str
    description: str | None = None
    primary_language: PrimaryLanguage | None = None
    is_archived: bool = False
    is_template: bool = False
    star_count: int = 0
    fork_count: int = 0

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name:
            raise CardValidationError("Repository name must be a non-empty string")
        if not isinstance(self.name_with_owner, str) or not self.name_with_owner:
            raise CardValidationError("Repository nameWithOwner must be a non-empty string")
        if self.description is not None and not isinstance(self.description, str):
            raise CardValidationError("Repository description must be a string or null")
        _check_flags(self, ("is_archived", "is_template"))
        for field_name in ("star_count", "fork_count"):
            value = getattr(self, field_name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise CardValidationError(f"{field_name} must be an integer, got {value!r}")
            if value < 0:
                raise CardValidationError(f"{field_name} must be non-negative, got {value}")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "RepositorySummary":
        """Build from GitHub GraphQL-shaped data or the equivalent snake_case keys."""
        name = data.get("name")
        language = data.get("primaryLanguage", data.get("primary_language"))
        if isinstance(language, Mapping) and language.get("name"):
            primary_language = PrimaryLanguage(name=language["name"], color=language.get("color"))
        else:
            primary_language = None

        star_count = data.get("starCount", data.get("star_count"))
        if star_count is None:
            stargazers = data.get("stargazers") or {}
            if not isinstance(stargazers, Mapping):
                raise CardValidationError(f"stargazers must be a mapping with totalCount, got {stargazers!r}")
            star_count = stargazers.get("totalCount", 0)

        return cls(
            name=name,
            name_with_owner=data.get("nameWithOwner", data.get("name_with_owner")) or name,
            description=data.get("description"),
            primary_language=primary_language,
            is_archived=_as_bool(data.get("isArchived", data.get("is_archived", False))),
            is_template=_as_bool(data.get("isTemplate", data.get("is_template", False))),
            star_count=_as_count(star_count),
            fork_count=_as_count(data.get("forkCount", data.get("fork_count", 0))),
        )


@dataclass(frozen=True)
class RenderOptions:
    """Every option the repository card understands, with its default."""

    hide_border: bool = False
    title_color: str | None = None
    icon_color: str | None = None
    text_color: str | None = None
    bg_color: str | None = None
    border_color: str | None = None
    show_owner: bool = False
    theme: str = DEFAULT_THEME_NAME
    border_radius: float | None = None
    locale: str | None = None
    description_lines_count: int | None = None
    disable_animations: bool = False

    def __post_init__(self):
        _check_flags(self, ("hide_border", "show_owner", "disable_animations"))
        if not isinstance(self.theme, str):
            raise CardValidationError(f"theme must be a string, got {self.theme!r}")
        for field_name in ("title_color", "icon_color", "text_color", "bg_color", "border_color", "locale"):
            value = getattr(self, field_name)
            if value is not None and not isinstance(value, str):
                raise CardValidationError(f"{field_name} must be a string or null, got {value!r}")
        lines = self.description_lines_count
        if lines is not None and (isinstance(lines, bool) or not isinstance(lines, int)):
            raise CardValidationError(f"description_lines_count must be an integer, got {lines!r}")
        radius = self.border_radius
        if radius is not None and (isinstance(radius, bool) or not isinstance(radius, (int, float))):
            raise CardValidationError(f"border_radius must be a number, got {radius!r}")

    @property
    def description_lines(self) -> int:
        """Requested description line count clamped to 1..3 (3 when unset)."""
        if self.description_lines_count is None:
            return DESCRIPTION_MAX_LINES
        return clamp_value(self.description_lines_count, DESCRIPTION_MIN_LINES, DESCRIPTION_MAX_LINES)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "RenderOptions":
        """Build options from loosely typed config or query data; unknown keys are ignored."""
        data = dict(data or {})
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.debug("Ignoring unknown render options: %s", ", ".join(unknown))

        kwargs: dict[str, Any] = {}
        for key in ("hide_border", "show_owner", "disable_animations"):
            if key in data:
                kwargs[key] = _as_bool(data[key])
        for key in ("title_color", "icon_color", "text_color", "bg_color", "border_color", "locale"):
            if data.get(key) not in (None, ""):
                kwargs[key] = str(data[key])
        if data.get("theme"):
            kwargs["theme"] = str(data["theme"])
        if data.get("border_radius") not in (None, ""):
            kwargs["border_radius"] = _as_number(data["border_radius"], "border_radius")
        if data.get("description_lines_count") not in (None, ""):
            kwargs["description_lines_count"] = int(
                _as_number(data["description_lines_count"], "description_lines_count")
            )
        return cls(**kwargs)


def _check_flags(instance: Any, names: tuple[str, ...]) -> None:
    for name in names:
        value = getattr(instance, name)
        if not isinstance(value, bool):
            raise CardValidationError(f"{name} must be a boolean, got {value!r}")


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes", "on")
    return bool(value)


def _as_number(value: Any, name: str) -> float:
    if isinstance(value, bool):
        raise CardValidationError(f"{name} must be a number, got {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError) as e:
        raise CardValidationError(f"{name} must be a number, got {value!r}") from e
    if not math.isfinite(number):
        raise CardValidationError(f"{name} must be finite, got {value!r}")
    return number


def _as_count(value: Any) -> Any:
    if isinstance(value, str) and value.strip().isdigit():
        return int(value)
    return value


def card_height(description_lines: int) -> int:
    """Canvas height for a card whose description block holds ``description_lines`` lines."""
    return HEIGHT_BASE + description_lines * LINE_HEIGHT + HEIGHT_TRAILING_MARGIN


def _badge(label: str, colors: CardColors) -> Markup:
    return card_templates.render("badge", label=label, color=colors.text_color)


def _select_badge(repo: RepositorySummary, i18n: I18n, colors: CardColors) -> Markup:
    if repo.is_template:
        return _badge(i18n.t("repocard.template"), colors)
    if repo.is_archived:
        return _badge(i18n.t("repocard.archived"), colors)
    return Markup("")


def _accessibility_desc(repo: RepositorySummary, description: str) -> str:
    parts = [description]
    if repo.primary_language:
        parts.append(f"Language: {repo.primary_language.name}")
    parts.append(f"Stars: {k_formatter(repo.star_count)}")
    parts.append(f"Forks: {k_formatter(repo.fork_count)}")
    return ". ".join(parts)


def render_repo_card(repo: RepositorySummary, options: RenderOptions | None = None) -> str:
    """
    Render the repository card as an SVG document.

    Args:
        repo: Repository data to display
        options: Rendering options; defaults apply when omitted

    Returns:
        The complete SVG markup, 400 units wide and as tall as the description needs.

    Raises:
        CardValidationError: If ``repo`` or ``options`` is not of the expected type.
    """
    if not isinstance(repo, RepositorySummary):
        raise CardValidationError(f"Expected RepositorySummary, got {type(repo).__name__}")
    options = options or RenderOptions()
    if not isinstance(options, RenderOptions):
        raise CardValidationError(f"Expected RenderOptions, got {type(options).__name__}")

    description_lines = options.description_lines

    colors = get_card_colors(
        title_color=options.title_color,
        icon_color=options.icon_color,
        text_color=options.text_color,
        bg_color=options.bg_color,
        border_color=options.border_color,
        theme=options.theme,
    )

    description = normalize_description(repo.description)
    lines = wrap_text_multiline(description, DESCRIPTION_LINE_WIDTH, description_lines)
    description_svg = card_templates.render("description", lines=[encode_html(line) for line in lines])

    height = card_height(description_lines)

    header = repo.name_with_owner if options.show_owner else repo.name
    title = truncate_title(header, TITLE_MAX_CHARS)

    i18n = I18n(locale=options.locale)
    badge_svg = _select_badge(repo, i18n, colors)

    stars = icon_with_label(get_icon("star"), repo.star_count, "stargazers", ICON_SIZE)
    forks = icon_with_label(get_icon("fork"), repo.fork_count, "forkcount", ICON_SIZE)
    stats_row = flex_layout([stars, forks], gap=STATS_GAP)
    stats_svg = card_templates.render(
        "stats",
        y=height - STATS_BOTTOM_OFFSET,
        items=[placed.markup for placed in stats_row],
    )

    card = Card(
        colors=colors,
        width=CARD_WIDTH,
        height=height,
        border_radius=options.border_radius,
        title=title,
        title_prefix_icon=get_icon("contribs"),
    )
    card.set_hide_border(options.hide_border)
    card.set_css(card_templates.render("repo_card_css", colors=colors))
    card.set_accessibility_label(title=title, desc=_accessibility_desc(repo, description))
    if options.disable_animations:
        card.disable_animations()

    logger.debug("Rendering card for %s (%d description lines, height %d)", header, len(lines), height)

    return card.render(Markup("\n").join([badge_svg, description_svg, stats_svg]))
