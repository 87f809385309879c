"""Text helpers for the repository card: width estimates, wrapping and formatting."""

import unicodedata
from decimal import ROUND_HALF_UP, Decimal

import emoji
from markupsafe import Markup, escape

DESCRIPTION_PLACEHOLDER = "No description provided"
ELLIPSIS = "..."

# Advance widths (in em) of printable ASCII, starting at the space character (32).
# Measured once from Segoe UI; anything outside the table uses the average.
_ASCII_WIDTHS = [
    0.2796875, 0.2765625, 0.3546875, 0.5546875, 0.5546875, 0.8890625, 0.665625, 0.190625,
    0.3328125, 0.3328125, 0.3890625, 0.5828125, 0.2765625, 0.3328125, 0.2765625, 0.3015625,
    0.5546875, 0.5546875, 0.5546875, 0.5546875, 0.5546875, 0.5546875, 0.5546875, 0.5546875,
    0.5546875, 0.5546875, 0.2765625, 0.2765625, 0.584375, 0.5828125, 0.584375, 0.5546875,
    1.0140625, 0.665625, 0.665625, 0.721875, 0.721875, 0.665625, 0.609375, 0.7765625,
    0.721875, 0.2765625, 0.5, 0.665625, 0.5546875, 0.8328125, 0.721875, 0.7765625,
    0.665625, 0.7765625, 0.721875, 0.665625, 0.609375, 0.721875, 0.665625, 0.94375,
    0.665625, 0.665625, 0.609375, 0.2765625, 0.3546875, 0.2765625, 0.4765625, 0.5546875,
    0.3328125, 0.5546875, 0.5546875, 0.5, 0.5546875, 0.5546875, 0.2765625, 0.5546875,
    0.5546875, 0.221875, 0.240625, 0.5, 0.221875, 0.8328125, 0.5546875, 0.5546875,
    0.5546875, 0.5546875, 0.3328125, 0.5, 0.2765625, 0.5546875, 0.5, 0.721875,
    0.5, 0.5, 0.5, 0.3546875, 0.259375, 0.353125, 0.5890625,
]
_FIRST_PRINTABLE = 32
_AVERAGE_WIDTH = 0.5279276315789471


def _char_width(char: str) -> float:
    code = ord(char)
    if code < _FIRST_PRINTABLE:
        return 0.0
    index = code - _FIRST_PRINTABLE
    if index < len(_ASCII_WIDTHS):
        return _ASCII_WIDTHS[index]
    return _AVERAGE_WIDTH


def measure_text(text: str, font_size: float = 10) -> float:
    """
    Estimate the rendered width of ``text`` in pixels.

    This is a per-character approximation for the card's sans-serif stack, not
    real glyph metrics. Expect a few percent of error on mixed text and more on
    scripts outside ASCII, which are all counted at the average advance.
    """
    return sum(_char_width(c) for c in str(text)) * font_size


def display_width(text: str) -> int:
    """Column count of ``text``, counting East Asian wide characters twice."""
    return sum(2 if unicodedata.east_asian_width(c) in ("F", "W") else 1 for c in text)


def _cut_to_width(text: str, width: int) -> str:
    columns = 0
    for i, char in enumerate(text):
        columns += 2 if unicodedata.east_asian_width(char) in ("F", "W") else 1
        if columns > width:
            return text[:i]
    return text


def parse_emojis(text: str) -> str:
    """Replace ``:shortcode:`` sequences with their emoji glyphs."""
    return emoji.emojize(text, language="alias")


def normalize_description(description: str | None) -> str:
    """Substitute emoji shortcodes and fall back to the placeholder for empty input."""
    text = (description or "").strip()
    if not text:
        return DESCRIPTION_PLACEHOLDER
    return parse_emojis(text)


def truncate_line(line: str, width: int) -> str:
    """Shorten ``line`` so that it plus the ellipsis fits within ``width`` columns."""
    budget = max(width - len(ELLIPSIS), 0)
    return _cut_to_width(line, budget).rstrip() + ELLIPSIS


def wrap_text_multiline(text: str, width: int = 59, max_lines: int = 3) -> list[str]:
    """
    Greedily pack the words of ``text`` into at most ``max_lines`` lines.

    Line length is measured in display columns (see ``display_width``), a
    stand-in for pixel width that is stable for the description font. When
    words are left over after the last line, that line is cut and ends with
    an ellipsis; the ellipsis counts against ``width``. A single word wider
    than ``width`` keeps a line of its own instead of being dropped. Runs of
    whitespace, newlines included, collapse to single spaces.
    """
    words = text.split()
    lines: list[str] = []
    current = ""

    for w in words:
        candidate = f"{current} {w}".strip()
        if display_width(candidate) <= width:
            current = candidate
            continue

        if current:
            lines.append(current)
            current = w
        else:
            lines.append(w)
            current = ""

    if current:
        lines.append(current)

    if not lines:
        return [DESCRIPTION_PLACEHOLDER]

    if len(lines) > max_lines:
        lines = lines[:max_lines]
        lines[-1] = truncate_line(lines[-1], width)

    return lines


def truncate_title(title: str, max_chars: int = 35) -> str:
    """Cut a display title to ``max_chars`` characters plus an ellipsis."""
    if len(title) > max_chars:
        return f"{title[:max_chars]}{ELLIPSIS}"
    return title


def k_formatter(num: int) -> str:
    """Compact a count: 999 -> "999", 1000 -> "1k", 1234 -> "1.2k", 1250 -> "1.3k"."""
    if abs(num) > 999:
        thousands = Decimal(abs(num)).scaleb(-3).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
        value = str(thousands).removesuffix(".0")
        sign = "-" if num < 0 else ""
        return f"{sign}{value}k"
    return str(num)


def clamp_value(number: int, minimum: int, maximum: int) -> int:
    return max(minimum, min(number, maximum))


def encode_html(text: str) -> Markup:
    """Escape markup-significant characters and drop backspace control codes."""
    return escape(str(text).replace("\b", ""))
