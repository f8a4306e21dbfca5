"""Screen geometry and the layout arithmetic used when drawing the menu."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import IntFlag

REFERENCE_HEIGHT = 240
WIDE_REFERENCE_HEIGHT = 180
WIDE_MARGIN = 60
LINE_BREAK_WORD = "-"


class Align(IntFlag):
    """Horizontal and vertical alignment of text around its anchor point."""

    H_LEFT = 1
    H_RIGHT = 2
    H_CENTER = 4
    V_TOP = 8
    V_BOTTOM = 16
    V_MIDDLE = 32


@dataclass(frozen=True)
class ScreenGeometry:
    """Size of the screen and the proportional scaling derived from it."""

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("screen dimensions must be positive")

    def ratio(self) -> float:
        """Width divided by height."""
        return self.width / self.height

    def is_four_by_three(self) -> bool:
        """Whether the screen has a 4:3 aspect ratio."""
        return 1.33 <= self.ratio() <= 1.34

    def proportional(self, number: int) -> int:
        """Scale a size or distance given for a 240-line 4:3 screen to this one."""
        if self.is_four_by_three():
            return int(self.height * number / REFERENCE_HEIGHT)
        usable = self.height - self.height * WIDE_MARGIN / REFERENCE_HEIGHT
        return int(usable * number / WIDE_REFERENCE_HEIGHT)

    def magic_number(self) -> int:
        """The widest a single line of text may be drawn."""
        return self.width - self.proportional(2)


def _screen_divisions(geometry: ScreenGeometry, parts: int) -> int:
    return int(geometry.ratio() * parts / 1.33)


def _check_image(image_width: float, image_height: float) -> None:
    if image_width <= 0 or image_height <= 0:
        raise ValueError("image dimensions must be positive")


def aligned_position(
    x: int, y: int, width: int, height: int, align: int
) -> tuple[int, int]:
    """Return the top-left corner of a ``width`` x ``height`` box anchored at (x, y)."""
    if align & Align.H_CENTER:
        x -= width // 2
    elif align & Align.H_RIGHT:
        x -= width
    if align & Align.V_MIDDLE:
        y -= height // 2
    elif align & Align.V_TOP:
        y -= height
    return x, y


def truncate_to_width(
    text: str, max_width: int, measure: Callable[[str], int]
) -> str:
    """Return the longest prefix of ``text`` whose measured width fits."""
    for end in range(len(text), -1, -1):
        prefix = text[:end]
        if measure(prefix) <= max_width:
            return prefix
    return ""


def wrap_words(
    text: str, max_width: int, measure: Callable[[str], int]
) -> list[str]:
    """Split ``text`` into lines no wider than ``max_width`` where possible.

    Words are separated by spaces; a lone ``-`` forces a line break and is
    dropped. A word too wide on its own still gets a line of its own. Text
    of fewer than two words is returned as a single line, unchanged.
    """
    words = [word for word in text.split(" ") if word]
    if len(words) < 2:
        return [text]

    lines: list[str] = []
    index = 0
    while index < len(words):
        line = [words[index]]
        index += 1
        while index < len(words):
            word = words[index]
            if word == LINE_BREAK_WORD:
                index += 1
                break
            if measure(" ".join([*line, word])) > max_width:
                break
            line.append(word)
            index += 1
        lines.append(" ".join(line))
    return lines


def split_error_message(message: str) -> tuple[str, ...]:
    """Split an error message into its display lines at the first ``-``."""
    first, dash, rest = message.partition("-")
    if not dash:
        return (message,)
    return (first, rest)


def cpu_prefixed(name: str, cpu: int, underclock: int, overclock: int) -> str:
    """Prefix a game name with ``-`` or ``+`` when the CPU is under- or overclocked."""
    if cpu == underclock:
        return "-" + name
    if cpu == overclock:
        return "+" + name
    return name


def fit_centered_image(
    image_width: float,
    image_height: float,
    screen_width: int,
    screen_height: int,
    keep_ratio: bool,
) -> tuple[float, float, bool]:
    """Size an image to fill the screen; return ``(width, height, smoothing)``.

    The image is scaled to the screen height, or to the screen width when that
    would be too wide. Without ``keep_ratio`` the width is stretched to the
    screen. Smoothing is needed when the height changes.
    """
    _check_image(image_width, image_height)
    ratio = image_width / image_height
    height = float(screen_height)
    width = height * ratio
    if width > screen_width:
        ratio = height / width
        width = float(screen_width)
        height = width * ratio
    if not keep_ratio:
        width = float(screen_width)
    smoothing = int(height) != int(image_height)
    return width, height, smoothing


def traditional_art_size(
    geometry: ScreenGeometry, image_width: float, image_height: float
) -> tuple[float, float, bool]:
    """Size game art for the traditional layout; return ``(width, height, smoothing)``."""
    _check_image(image_width, image_height)
    divisions = _screen_divisions(geometry, 5)
    ratio = image_width / image_height
    height = float(geometry.proportional(90))
    width = height * ratio
    smoothing = False
    target = 2 * (geometry.width // divisions) - geometry.proportional(8)
    if width != target:
        ratio = height / width
        width = float(target)
        height = width * ratio
        if geometry.is_four_by_three():
            limit, new_height = 90, 90
        else:
            limit, new_height = 116, 100
        if height > geometry.proportional(limit):
            ratio = width / height
            height = float(geometry.proportional(new_height))
            width = height * ratio
        smoothing = True
    return width, height, smoothing


def custom_art_size(
    geometry: ScreenGeometry,
    image_width: float,
    image_height: float,
    art_width: int,
    art_height: int,
) -> tuple[float, float]:
    """Size game art to fit the theme's art box; return ``(width, height)``."""
    _check_image(image_width, image_height)
    box_width = geometry.proportional(art_width)
    box_height = geometry.proportional(art_height)
    ratio = image_width / image_height
    height = float(box_height)
    width = height * ratio
    if width != box_width:
        ratio = height / width
        width = float(box_width)
        height = width * ratio
        if height > box_height:
            ratio = width / height
            height = float(box_height)
            width = height * ratio
    return width, height