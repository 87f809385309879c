"""Inline fragments and the flex-style row/column layout used for the stats row."""

from dataclasses import dataclass

from markupsafe import Markup

import card_templates
from card_text import k_formatter, measure_text

STAT_FONT_SIZE = 12
ICON_LABEL_GAP = 20

ROW = "row"
COLUMN = "column"


@dataclass(frozen=True)
class InlineFragment:
    """Pre-rendered markup together with its estimated width."""

    markup: Markup
    width: float


@dataclass(frozen=True)
class PlacedFragment:
    fragment: InlineFragment
    offset: float
    direction: str = ROW

    @property
    def markup(self) -> Markup:
        x, y = (self.offset, 0) if self.direction == ROW else (0, self.offset)
        return card_templates.render("group", x=_fmt(x), y=_fmt(y), content=self.fragment.markup)


def _fmt(value: float) -> str:
    """Format a coordinate without a trailing ``.0`` for whole numbers."""
    return str(int(value)) if float(value).is_integer() else f"{value:.2f}".rstrip("0").rstrip(".")


def flex_layout(fragments: list[InlineFragment], gap: float, direction: str = ROW) -> list[PlacedFragment]:
    """
    Place fragments one after another along ``direction``.

    The offset of each fragment is the sum of the widths and gaps of the ones
    before it. The row never wraps; fitting it on the card is up to the caller.
    """
    if direction not in (ROW, COLUMN):
        raise ValueError(f"Unknown layout direction: {direction}")

    placed: list[PlacedFragment] = []
    offset = 0.0
    for fragment in fragments:
        placed.append(PlacedFragment(fragment=fragment, offset=offset, direction=direction))
        offset += fragment.width + gap
    return placed


def layout_extent(placed: list[PlacedFragment]) -> float:
    """Total length taken by a laid-out sequence, excluding the trailing gap."""
    if not placed:
        return 0.0
    last = placed[-1]
    return last.offset + last.fragment.width


def icon_with_label(icon: Markup, count: int, label: str, icon_size: int = 16) -> InlineFragment:
    """
    Build a stat badge: icon, compacted count and an accessible label.

    ``label`` becomes the ``data-testid`` and ``aria-label`` of the count text so
    tooling can find the badge. The fragment width is the icon size plus the
    estimated width of the formatted count.
    """
    formatted = k_formatter(count)
    markup = card_templates.render(
        "icon_with_label",
        icon=icon,
        icon_size=icon_size,
        label_offset=ICON_LABEL_GAP,
        testid=label,
        label=formatted,
    )
    return InlineFragment(markup=markup, width=icon_size + measure_text(formatted, STAT_FONT_SIZE))
