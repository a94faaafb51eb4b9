"""Render surfaces and the container that stacks them."""

from typing import Optional, List
from dataclasses import dataclass, field
import logging
import numpy as np
from numpy.typing import NDArray

from candycorn.graphics.primitives import Color, new_buffer

logger = logging.getLogger(__name__)


@dataclass
class Canvas:
    """A named RGBA drawing surface.

    ``x``/``y`` offset the canvas from its horizontally centred slot in the
    container.
    """

    name: str
    buffer: NDArray[np.uint8]
    visible: bool = True
    x: int = 0
    y: int = 0
    z_order: int = 0

    @classmethod
    def create(cls, name: str, width: int, height: int, z_order: int = 0) -> "Canvas":
        return cls(name=name, buffer=new_buffer(width, height), z_order=z_order)

    @property
    def width(self) -> int:
        return self.buffer.shape[1]

    @property
    def height(self) -> int:
        return self.buffer.shape[0]

    def resize(self, width: int, height: int) -> bool:
        """Match the given size. Returns True if the buffer was replaced."""
        if (width, height) == (self.width, self.height):
            return False
        logger.debug(f"Canvas {self.name} resized to {width}x{height}")
        self.buffer = new_buffer(width, height)
        return True


@dataclass
class Container:
    """Holds the canvases that make up the screen.

    Canvases are composited in z order, each centred horizontally on the
    widest visible canvas and aligned to the top.
    """

    background: Color = (0, 0, 0)
    canvases: List[Canvas] = field(default_factory=list)
    buffer: NDArray[np.uint8] = field(
        default_factory=lambda: np.zeros((0, 0, 3), dtype=np.uint8)
    )

    def attach(self, canvas: Canvas) -> Canvas:
        """Add a canvas, replacing any canvas with the same name."""
        self.detach(canvas.name)
        self.canvases.append(canvas)
        self.canvases.sort(key=lambda c: c.z_order)
        logger.debug(f"Canvas attached: {canvas.name}")
        return canvas

    def detach(self, name: str) -> bool:
        """Remove a canvas by name."""
        for i, canvas in enumerate(self.canvases):
            if canvas.name == name:
                self.canvases.pop(i)
                logger.debug(f"Canvas detached: {name}")
                return True
        return False

    def get(self, name: str) -> Optional[Canvas]:
        """Get a canvas by name."""
        for canvas in self.canvases:
            if canvas.name == name:
                return canvas
        return None

    def __contains__(self, canvas: Canvas) -> bool:
        return any(c is canvas for c in self.canvases)

    def composite(self) -> NDArray[np.uint8]:
        """Composite all visible canvases into an RGB frame."""
        visible = [c for c in self.canvases if c.visible]
        width = max((c.width + max(0, c.x) for c in visible), default=0)
        height = max((c.height + max(0, c.y) for c in visible), default=0)

        if self.buffer.shape[:2] != (height, width):
            self.buffer = np.zeros((height, width, 3), dtype=np.uint8)
        self.buffer[:, :] = self.background

        for canvas in visible:
            x = (width - canvas.width) // 2 + canvas.x
            y = canvas.y

            src_x1 = max(0, -x)
            src_y1 = max(0, -y)
            src_x2 = min(canvas.width, width - x)
            src_y2 = min(canvas.height, height - y)
            if src_x2 <= src_x1 or src_y2 <= src_y1:
                continue

            dst_x1 = max(0, x)
            dst_y1 = max(0, y)
            dst_x2 = dst_x1 + (src_x2 - src_x1)
            dst_y2 = dst_y1 + (src_y2 - src_y1)

            src = canvas.buffer[src_y1:src_y2, src_x1:src_x2]
            dst = self.buffer[dst_y1:dst_y2, dst_x1:dst_x2]

            alpha = src[:, :, 3:4] / 255.0
            dst[:] = (src[:, :, :3] * alpha + dst * (1 - alpha)).astype(np.uint8)

        return self.buffer
