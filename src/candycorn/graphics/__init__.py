"""Graphics module for CANDYCORN rendering."""

from candycorn.graphics.renderer import Canvas, Container
from candycorn.graphics.primitives import (
    clear,
    fill,
    fill_rect,
    draw_ring,
    draw_text,
    draw_text_centered,
    draw_text_runs,
    draw_image,
    new_buffer,
    text_width,
    text_height,
)

__all__ = [
    # Surfaces
    "Canvas",
    "Container",
    # Primitives
    "clear",
    "fill",
    "fill_rect",
    "draw_ring",
    "draw_text",
    "draw_text_centered",
    "draw_text_runs",
    "draw_image",
    "new_buffer",
    "text_width",
    "text_height",
]
