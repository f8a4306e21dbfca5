"""Drawing text and filled rectangles onto a pygame surface."""

from __future__ import annotations

import os
from collections.abc import Sequence
from typing import Any

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from simplemenu.layout import (  # noqa: E402
    Align,
    ScreenGeometry,
    aligned_position,
    split_error_message,
    truncate_to_width,
    wrap_words,
)

Color = Sequence[int]

ERROR_OFFSET = 3
ERROR_LINE_OFFSET = 12


class TextRenderer:
    """Draws text and rectangles onto ``surface`` laid out for ``geometry``.

    Fonts are objects with ``size(text)`` and ``render(text, antialias,
    color, background=None)``, such as ``pygame.font.Font``.
    """

    def __init__(self, surface: pygame.Surface, geometry: ScreenGeometry) -> None:
        self.surface = surface
        self.geometry = geometry

    def draw_text(
        self,
        font: Any,
        x: int,
        y: int,
        text: str,
        color: Color,
        align: int,
        background: Color | None = None,
    ) -> pygame.Rect:
        """Draw one line of text anchored at (x, y); return the area it covers.

        Text wider than the screen allows is cut short. With a background
        colour the text is drawn on a filled box.
        """
        fitted = truncate_to_width(
            text, self.geometry.magic_number(), lambda s: font.size(s)[0]
        )
        if background is None:
            rendered = font.render(fitted, True, tuple(color))
        else:
            rendered = font.render(fitted, True, tuple(color), tuple(background))
        width, height = rendered.get_size()
        left, top = aligned_position(x, y, width, height, align)
        self.surface.blit(rendered, (left, top))
        return pygame.Rect(left, top, width, height)

    def draw_multiline_text(
        self,
        font: Any,
        x: int,
        y: int,
        text: str,
        color: Color,
        align: int,
        max_width: int,
        line_separation: int,
    ) -> list[pygame.Rect]:
        """Draw text wrapped to ``max_width``, one line under the other."""
        step = self.geometry.proportional(line_separation)
        rects = []
        for line in wrap_words(text, max_width, lambda s: font.size(s)[0]):
            rects.append(self.draw_text(font, x, y, line, color, align))
            y += step
        return rects

    def draw_error(self, font: Any, message: str, color: Color) -> list[pygame.Rect]:
        """Draw an error message centred on screen, split in two at a ``-``."""
        geometry = self.geometry
        centre_x = geometry.width // 2
        centre_y = geometry.height // 2 + geometry.proportional(ERROR_OFFSET)
        align = Align.V_MIDDLE | Align.H_CENTER
        lines = split_error_message(message)
        if len(lines) == 1:
            return [self.draw_text(font, centre_x, centre_y, message, color, align)]
        gap = geometry.proportional(ERROR_LINE_OFFSET)
        first, second = lines
        return [
            self.draw_text(font, centre_x, centre_y - gap, first, color, align),
            self.draw_text(font, centre_x, centre_y + gap, second, color, align),
        ]

    def draw_rectangle(
        self, width: int, height: int, x: int, y: int, color: Color
    ) -> pygame.Rect:
        """Fill a rectangle with ``color``; return it."""
        rect = pygame.Rect(x, y, width, height)
        self.surface.fill(tuple(color), rect)
        return rect

    def draw_transparent_rectangle(
        self, width: int, height: int, x: int, y: int, color: Color, opacity: int
    ) -> pygame.Rect:
        """Blend a rectangle of ``color`` over the surface at ``opacity`` (0-255)."""
        rect = pygame.Rect(x, y, width, height)
        overlay = pygame.Surface((max(width, 0), max(height, 0)))
        overlay.fill(tuple(color))
        overlay.set_alpha(opacity)
        self.surface.blit(overlay, rect.topleft)
        return rect