"""Outer SVG envelope shared by cards: background, border, title and styles."""

from markupsafe import Markup

import card_templates
from card_colors import CardColors
from card_layout import InlineFragment, flex_layout
from card_text import encode_html

ANIMATIONS_CSS = Markup(
    """/* Animations */
    @keyframes scaleInAnimation {
      from { transform: translate(-5px, 5px) scale(0); }
      to { transform: translate(-5px, 5px) scale(1); }
    }
    @keyframes fadeInAnimation {
      from { opacity: 0; }
      to { opacity: 1; }
    }"""
)

NO_ANIMATIONS_CSS = Markup("* { animation-duration: 0s !important; animation-delay: 0s !important; }")


class Card:
    """Renders the card frame around a pre-rendered body."""

    PADDING_X = 25
    PADDING_Y = 35
    TITLE_GAP = 25
    DEFAULT_BORDER_RADIUS = 4.5

    def __init__(
        self,
        colors: CardColors,
        width: int = 100,
        height: int = 100,
        border_radius: float | None = None,
        title: str = "",
        title_prefix_icon: Markup | None = None,
    ):
        self.colors = colors
        self.width = width
        self.height = height
        self.border_radius = self.DEFAULT_BORDER_RADIUS if border_radius is None else border_radius
        self.title = encode_html(title)
        self.title_prefix_icon = title_prefix_icon

        self.hide_border = False
        self.animations = True
        self.css = Markup("")
        self.a11y_title = ""
        self.a11y_desc = ""

    def set_hide_border(self, value: bool) -> None:
        self.hide_border = value

    def disable_animations(self) -> None:
        self.animations = False

    def set_css(self, value: Markup) -> None:
        self.css = Markup(value)

    def set_accessibility_label(self, title: str, desc: str) -> None:
        self.a11y_title = title
        self.a11y_desc = desc

    def render_title(self) -> Markup:
        items = []
        if self.title_prefix_icon:
            items.append(card_templates.render("title_icon", icon=self.title_prefix_icon))
        items.append(card_templates.render("title_text", title=self.title))

        # Title parts carry no measured width; the gap alone spaces them.
        placed = flex_layout([InlineFragment(markup=item, width=0) for item in items], gap=self.TITLE_GAP)

        return card_templates.render(
            "card_title",
            padding_x=self.PADDING_X,
            padding_y=self.PADDING_Y,
            items=[p.markup for p in placed],
        )

    @property
    def body_offset(self) -> int:
        return self.PADDING_Y + 20

    def render(self, body: Markup) -> str:
        """Wrap ``body`` in the card frame and return the SVG document."""
        return str(
            card_templates.render(
                "card",
                width=self.width,
                height=self.height,
                colors=self.colors,
                border_radius=self.border_radius,
                hide_border=self.hide_border,
                a11y_title=self.a11y_title,
                a11y_desc=self.a11y_desc,
                css=self.css,
                animations=ANIMATIONS_CSS if self.animations else NO_ANIMATIONS_CSS,
                title_markup=self.render_title(),
                body_offset=self.body_offset,
                body=Markup(body),
            )
        )
