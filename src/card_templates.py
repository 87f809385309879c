"""SVG fragment templates for the repository card.

Every piece of markup the card emits goes through one of these templates, so
values are escaped by Jinja's autoescaping and only trusted fragments (icon
paths, already-rendered children) are passed in as ``Markup``.
"""

from functools import lru_cache

from jinja2 import DictLoader, Environment, StrictUndefined
from markupsafe import Markup

TEMPLATES: dict[str, str] = {
    "group": '<g transform="translate({{ x }}, {{ y }})">{{ content }}</g>',
    "icon_with_label": (
        '<svg class="icon" y="-12" viewBox="0 0 16 16" version="1.1" '
        'width="{{ icon_size }}" height="{{ icon_size }}">{{ icon }}</svg>'
        '<g transform="translate({{ label_offset }}, 0)">'
        '<text data-testid="{{ testid }}" class="gray" aria-label="{{ testid }}: {{ label }}">{{ label }}</text>'
        "</g>"
    ),
    "badge": """
<g data-testid="badge" class="badge" transform="translate(320, -18)">
  <rect stroke="{{ color }}" stroke-width="1" width="70" height="20" x="-12" y="-14" ry="10" rx="10"></rect>
  <text x="23" y="-5" alignment-baseline="central" dominant-baseline="central" text-anchor="middle" fill="{{ color }}">{{ label }}</text>
</g>""",
    "description": """
<text data-testid="description" class="description" x="25" y="-5">
{% for line in lines %}  <tspan dy="1.2em" x="25">{{ line }}</tspan>
{% endfor %}</text>""",
    "stats": """
<g data-testid="stats" transform="translate(30, {{ y }})">
{% for item in items %}  {{ item }}
{% endfor %}</g>""",
    "repo_card_css": """.description { font: 400 13px 'Segoe UI', Ubuntu, Sans-Serif; fill: {{ colors.text_color }}; }
    .gray { font: 400 12px 'Segoe UI', Ubuntu, Sans-Serif; fill: {{ colors.text_color }}; }
    .icon { fill: {{ colors.icon_color }}; }
    .badge { font: 600 11px 'Segoe UI', Ubuntu, Sans-Serif; }
    .badge rect { opacity: 0.2; }""",
    "card_title": """
<g data-testid="card-title" transform="translate({{ padding_x }}, {{ padding_y }})">
{% for item in items %}  {{ item }}
{% endfor %}</g>""",
    "title_icon": '<svg class="icon" x="0" y="-13" viewBox="0 0 16 16" version="1.1" width="16" height="16">{{ icon }}</svg>',
    "title_text": '<text x="0" y="0" class="header" data-testid="header">{{ title }}</text>',
    "card": """<svg width="{{ width }}" height="{{ height }}" viewBox="0 0 {{ width }} {{ height }}" fill="none" xmlns="http://www.w3.org/2000/svg" role="img" aria-labelledby="descId">
  <title id="titleId">{{ a11y_title }}</title>
  <desc id="descId">{{ a11y_desc }}</desc>
  <style>
    .header { font: 600 18px 'Segoe UI', Ubuntu, Sans-Serif; fill: {{ colors.title_color }}; animation: fadeInAnimation 0.8s ease-in-out forwards; }
    @supports(-moz-appearance: auto) { .header { font-size: 15.5px; } }
    {{ css }}
    {{ animations }}
  </style>
  <rect data-testid="card-bg" x="0.5" y="0.5" rx="{{ border_radius }}" height="99%" stroke="{{ colors.border_color }}" width="{{ width - 1 }}" fill="{{ colors.bg_color }}" stroke-opacity="{{ 0 if hide_border else 1 }}"/>
  {{ title_markup }}
  <g data-testid="main-card-body" transform="translate(0, {{ body_offset }})">
{{ body }}
  </g>
</svg>
""",
}


@lru_cache(maxsize=1)
def _environment() -> Environment:
    return Environment(loader=DictLoader(TEMPLATES), autoescape=True, undefined=StrictUndefined)


def render(name: str, **context) -> Markup:
    """Render the named fragment template; the result is safe to nest in another template."""
    template = _environment().get_template(name)
    return Markup(template.render(**context))
