import logging
import math
from dataclasses import asdict, dataclass, field

logger = logging.getLogger(__name__)

DEFAULT_BACKGROUND = "#191724"
DEFAULT_FOREGROUND = "#e0def4"
DEFAULT_FONT_FAMILY = "Monospace"
DEFAULT_FONT_SIZE = 14.0
DEFAULT_SELECTION_BACKGROUND = "#403d52"

PALETTE_SIZE = 16
MIN_PALETTE_COLORS = 10
FALLBACK_PALETTE = [
    "#9ccfd8",
    "#c4a7e7",
    "#ebbcba",
    "#f6c177",
    "#ea9d34",
    "#d7827e",
    "#907aa9",
    "#b4637a",
    "#88a096",
    "#9bb1d6",
    "#c2d1b2",
    "#e8d1c5",
    "#d4b5d8",
    "#adcbe3",
    "#e1e1e1",
]


@dataclass
class Theme:
    background: str = DEFAULT_BACKGROUND
    foreground: str = DEFAULT_FOREGROUND
    palette: list[str] = field(default_factory=list)
    font_family: str = DEFAULT_FONT_FAMILY
    font_size: float = DEFAULT_FONT_SIZE
    selection_background: str = DEFAULT_SELECTION_BACKGROUND

    def to_dict(self) -> dict:
        data = asdict(self)
        # JSON has no NaN or Infinity
        if not math.isfinite(self.font_size):
            data["font_size"] = None
        return data


def _parse_font_size(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        return DEFAULT_FONT_SIZE


def parse_theme(content: str) -> Theme:
    """Build a Theme from ``key value...`` lines.

    Never fails: unknown keys and short lines are ignored, a bad font size
    falls back to the default, and a palette with fewer than ten colors is
    replaced by the built-in one.
    """
    theme = Theme()
    colors: dict[str, str] = {}

    for line in (content or "").splitlines():
        parts = line.split()
        if len(parts) < 2:
            continue
        key, val = parts[0], parts[1]
        if key == "background":
            theme.background = val
        elif key == "foreground":
            theme.foreground = val
        elif key == "selection_background":
            theme.selection_background = val
        elif key == "font_family":
            theme.font_family = " ".join(parts[1:])
        elif key == "font_size":
            theme.font_size = _parse_font_size(val)
        elif key.startswith("color"):
            colors[key] = val

    for i in range(PALETTE_SIZE):
        color = colors.get(f"color{i}")
        if color is not None:
            theme.palette.append(color)

    if len(theme.palette) < MIN_PALETTE_COLORS:
        theme.palette = list(FALLBACK_PALETTE)
    return theme


def load_theme(path) -> Theme:
    try:
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Theme file %s unreadable (%s); using defaults", path, exc)
        content = ""
    return parse_theme(content)
