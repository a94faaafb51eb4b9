"""Basic drawing primitives for CANDYCORN canvases.

Every canvas is an RGBA ``uint8`` numpy array of shape (height, width, 4).
Drawing follows canvas "source-over" rules: partially transparent paint is
blended onto what is already there and the destination alpha accumulates.
"""

from typing import Iterable, Tuple
import numpy as np
from numpy.typing import NDArray

# Type aliases
Color = Tuple[int, int, int]
Buffer = NDArray[np.uint8]

GLYPH_WIDTH = 3
GLYPH_HEIGHT = 5


def new_buffer(width: int, height: int) -> Buffer:
    """Create a fully transparent RGBA buffer."""
    return np.zeros((max(0, height), max(0, width), 4), dtype=np.uint8)


def clear(buffer: Buffer) -> None:
    """Clear buffer to fully transparent."""
    buffer[:, :] = 0


def fill(buffer: Buffer, color: Color, alpha: float = 1.0) -> None:
    """Paint the whole buffer with color."""
    h, w = buffer.shape[:2]
    fill_rect(buffer, 0, 0, w, h, color, alpha)


def fill_rect(
    buffer: Buffer,
    x: int,
    y: int,
    width: int,
    height: int,
    color: Color,
    alpha: float = 1.0,
) -> None:
    """Fill a rectangle, clipped to the buffer.

    Args:
        buffer: Target RGBA array
        x: Left edge x coordinate
        y: Top edge y coordinate
        width: Rectangle width
        height: Rectangle height
        color: RGB color tuple
        alpha: Paint opacity (0.0 to 1.0)
    """
    h, w = buffer.shape[:2]

    x1 = max(0, min(x, w))
    y1 = max(0, min(y, h))
    x2 = max(0, min(x + width, w))
    y2 = max(0, min(y + height, h))

    if x2 <= x1 or y2 <= y1:
        return

    region = buffer[y1:y2, x1:x2]
    _blend_into(region, np.array(color, dtype=np.float32), alpha)


def draw_ring(
    buffer: Buffer,
    cx: float,
    cy: float,
    radius: float,
    line_width: float,
    color: Color,
    alpha: float = 1.0,
) -> None:
    """Stroke a circle outline centred on the radius, like a canvas arc.

    Pixels whose distance from the centre lies within ``line_width / 2`` of
    ``radius`` are painted. Nothing is drawn for a non-positive width or alpha.
    """
    if line_width <= 0 or alpha <= 0:
        return

    h, w = buffer.shape[:2]
    half = line_width / 2.0

    # Only scan the ring's bounding box
    reach = abs(radius) + half
    x1 = max(0, int(np.floor(cx - reach)))
    y1 = max(0, int(np.floor(cy - reach)))
    x2 = min(w, int(np.ceil(cx + reach)) + 1)
    y2 = min(h, int(np.ceil(cy + reach)) + 1)
    if x2 <= x1 or y2 <= y1:
        return

    y_idx, x_idx = np.ogrid[y1:y2, x1:x2]
    dist = np.sqrt((x_idx + 0.5 - cx) ** 2 + (y_idx + 0.5 - cy) ** 2)
    mask = np.abs(dist - abs(radius)) <= half
    if not mask.any():
        return

    region = buffer[y1:y2, x1:x2]
    pixels = region[mask]
    _blend_into(pixels, np.array(color, dtype=np.float32), min(alpha, 1.0))
    region[mask] = pixels


def text_width(text: str, scale: int = 1) -> int:
    """Width in pixels of text drawn with the built-in font."""
    width = 0
    for char in text:
        if char == ' ':
            width += 4 * scale
        else:
            width += (GLYPH_WIDTH + 1) * scale
    # No spacing after the last glyph
    if text and text[-1] != ' ':
        width -= scale
    return width


def text_height(scale: int = 1) -> int:
    """Height in pixels of a line of text."""
    return GLYPH_HEIGHT * scale


def draw_text(
    buffer: Buffer,
    text: str,
    x: int,
    y: int,
    color: Color,
    scale: int = 1,
) -> Tuple[int, int]:
    """Draw text using the built-in bitmap font.

    Args:
        buffer: Target RGBA array
        text: Text string to draw (case-insensitive)
        x: Starting x coordinate
        y: Top y coordinate
        color: RGB color tuple
        scale: Scale factor for font size

    Returns:
        Tuple of (width, height) of rendered text in pixels
    """
    font = _FONT
    h, w = buffer.shape[:2]
    rgba = (*color, 255)
    cursor_x = x

    for char in text:
        if char == ' ':
            cursor_x += 4 * scale
            continue

        glyph = font.get(char.upper(), font['?'])

        for row_idx, row in enumerate(glyph):
            for col_idx, pixel in enumerate(row):
                if not pixel:
                    continue
                px1 = max(0, cursor_x + col_idx * scale)
                py1 = max(0, y + row_idx * scale)
                px2 = min(w, cursor_x + (col_idx + 1) * scale)
                py2 = min(h, y + (row_idx + 1) * scale)
                if px2 > px1 and py2 > py1:
                    buffer[py1:py2, px1:px2] = rgba

        cursor_x += (GLYPH_WIDTH + 1) * scale

    return text_width(text, scale), text_height(scale)


def draw_text_centered(
    buffer: Buffer,
    text: str,
    center_x: float,
    y: int,
    color: Color,
    scale: int = 1,
) -> Tuple[int, int]:
    """Draw text horizontally centred on center_x."""
    x = int(round(center_x - text_width(text, scale) / 2))
    return draw_text(buffer, text, x, y, color, scale)


def draw_text_runs(
    buffer: Buffer,
    runs: Iterable[Tuple[str, Color]],
    center_x: float,
    y: int,
    scale: int = 1,
) -> Tuple[int, int]:
    """Draw a line made of differently coloured pieces, centred as a whole.

    Example:
        draw_text_runs(buf, [("This is ", GRAY), ("Jack", ORANGE)], 360, 40, 4)
    """
    runs = list(runs)
    line = "".join(text for text, _ in runs)
    total = text_width(line, scale)
    cursor_x = int(round(center_x - total / 2))

    for text, color in runs:
        draw_text(buffer, text, cursor_x, y, color, scale)
        # Glyph cells and spaces are both four units wide
        cursor_x += len(text) * (GLYPH_WIDTH + 1) * scale

    return total, text_height(scale)


def draw_image(
    buffer: Buffer,
    image: Buffer,
    x: int,
    y: int,
    alpha: float = 1.0,
) -> None:
    """Draw an image onto the buffer with alpha blending.

    Args:
        buffer: Target RGBA array
        image: Source image array (height, width, 3 or 4)
        x: Top-left x coordinate
        y: Top-left y coordinate
        alpha: Global alpha multiplier (0.0 to 1.0)
    """
    x, y = int(round(x)), int(round(y))
    buf_h, buf_w = buffer.shape[:2]
    img_h, img_w = image.shape[:2]

    # Calculate visible region
    src_x1 = max(0, -x)
    src_y1 = max(0, -y)
    src_x2 = min(img_w, buf_w - x)
    src_y2 = min(img_h, buf_h - y)

    dst_x1 = max(0, x)
    dst_y1 = max(0, y)
    dst_x2 = dst_x1 + (src_x2 - src_x1)
    dst_y2 = dst_y1 + (src_y2 - src_y1)

    if src_x2 <= src_x1 or src_y2 <= src_y1:
        return  # Nothing to draw

    src_region = image[src_y1:src_y2, src_x1:src_x2]
    dst_region = buffer[dst_y1:dst_y2, dst_x1:dst_x2]

    if image.shape[2] == 4:
        src_alpha = (src_region[:, :, 3:4] / 255.0) * alpha
    else:
        src_alpha = np.full(src_region.shape[:2] + (1,), alpha)

    _composite(dst_region, src_region[:, :, :3].astype(np.float32), src_alpha)


def _blend_into(pixels: Buffer, rgb: NDArray[np.float32], alpha: float) -> None:
    """Blend a single colour over a block of RGBA pixels in place."""
    src_alpha = np.full(pixels.shape[:-1] + (1,), max(0.0, min(alpha, 1.0)))
    src_rgb = np.broadcast_to(rgb, pixels.shape[:-1] + (3,))
    _composite(pixels, src_rgb, src_alpha)


def _composite(dst: Buffer, src_rgb: NDArray, src_alpha: NDArray) -> None:
    """Source-over composite src onto dst (RGBA uint8) in place."""
    dst_rgb = dst[..., :3].astype(np.float32)
    dst_alpha = dst[..., 3:4].astype(np.float32) / 255.0

    out_alpha = src_alpha + dst_alpha * (1.0 - src_alpha)
    safe = np.where(out_alpha > 0, out_alpha, 1.0)
    out_rgb = (src_rgb * src_alpha + dst_rgb * dst_alpha * (1.0 - src_alpha)) / safe

    dst[..., :3] = np.clip(np.rint(out_rgb), 0, 255).astype(np.uint8)
    dst[..., 3:4] = np.clip(np.rint(out_alpha * 255.0), 0, 255).astype(np.uint8)


# Each character is a list of rows, each row is a list of 0/1 pixels
_FONT = {
    'A': [[0,1,0], [1,0,1], [1,1,1], [1,0,1], [1,0,1]],
    'B': [[1,1,0], [1,0,1], [1,1,0], [1,0,1], [1,1,0]],
    'C': [[0,1,1], [1,0,0], [1,0,0], [1,0,0], [0,1,1]],
    'D': [[1,1,0], [1,0,1], [1,0,1], [1,0,1], [1,1,0]],
    'E': [[1,1,1], [1,0,0], [1,1,0], [1,0,0], [1,1,1]],
    'F': [[1,1,1], [1,0,0], [1,1,0], [1,0,0], [1,0,0]],
    'G': [[0,1,1], [1,0,0], [1,0,1], [1,0,1], [0,1,1]],
    'H': [[1,0,1], [1,0,1], [1,1,1], [1,0,1], [1,0,1]],
    'I': [[1,1,1], [0,1,0], [0,1,0], [0,1,0], [1,1,1]],
    'J': [[0,0,1], [0,0,1], [0,0,1], [1,0,1], [0,1,0]],
    'K': [[1,0,1], [1,0,1], [1,1,0], [1,0,1], [1,0,1]],
    'L': [[1,0,0], [1,0,0], [1,0,0], [1,0,0], [1,1,1]],
    'M': [[1,0,1], [1,1,1], [1,0,1], [1,0,1], [1,0,1]],
    'N': [[1,0,1], [1,1,1], [1,1,1], [1,0,1], [1,0,1]],
    'O': [[0,1,0], [1,0,1], [1,0,1], [1,0,1], [0,1,0]],
    'P': [[1,1,0], [1,0,1], [1,1,0], [1,0,0], [1,0,0]],
    'Q': [[0,1,0], [1,0,1], [1,0,1], [1,1,1], [0,1,1]],
    'R': [[1,1,0], [1,0,1], [1,1,0], [1,0,1], [1,0,1]],
    'S': [[0,1,1], [1,0,0], [0,1,0], [0,0,1], [1,1,0]],
    'T': [[1,1,1], [0,1,0], [0,1,0], [0,1,0], [0,1,0]],
    'U': [[1,0,1], [1,0,1], [1,0,1], [1,0,1], [0,1,0]],
    'V': [[1,0,1], [1,0,1], [1,0,1], [0,1,0], [0,1,0]],
    'W': [[1,0,1], [1,0,1], [1,0,1], [1,1,1], [1,0,1]],
    'X': [[1,0,1], [1,0,1], [0,1,0], [1,0,1], [1,0,1]],
    'Y': [[1,0,1], [1,0,1], [0,1,0], [0,1,0], [0,1,0]],
    'Z': [[1,1,1], [0,0,1], [0,1,0], [1,0,0], [1,1,1]],
    '0': [[0,1,0], [1,0,1], [1,0,1], [1,0,1], [0,1,0]],
    '1': [[0,1,0], [1,1,0], [0,1,0], [0,1,0], [1,1,1]],
    '2': [[0,1,0], [1,0,1], [0,0,1], [0,1,0], [1,1,1]],
    '3': [[1,1,0], [0,0,1], [0,1,0], [0,0,1], [1,1,0]],
    '4': [[1,0,1], [1,0,1], [1,1,1], [0,0,1], [0,0,1]],
    '5': [[1,1,1], [1,0,0], [1,1,0], [0,0,1], [1,1,0]],
    '6': [[0,1,1], [1,0,0], [1,1,0], [1,0,1], [0,1,0]],
    '7': [[1,1,1], [0,0,1], [0,1,0], [0,1,0], [0,1,0]],
    '8': [[0,1,0], [1,0,1], [0,1,0], [1,0,1], [0,1,0]],
    '9': [[0,1,0], [1,0,1], [0,1,1], [0,0,1], [1,1,0]],
    '?': [[0,1,0], [1,0,1], [0,0,1], [0,0,0], [0,1,0]],
    '!': [[0,1,0], [0,1,0], [0,1,0], [0,0,0], [0,1,0]],
    '.': [[0,0,0], [0,0,0], [0,0,0], [0,0,0], [0,1,0]],
    ',': [[0,0,0], [0,0,0], [0,0,0], [0,1,0], [1,0,0]],
    ':': [[0,0,0], [0,1,0], [0,0,0], [0,1,0], [0,0,0]],
    '-': [[0,0,0], [0,0,0], [1,1,1], [0,0,0], [0,0,0]],
    "'": [[0,1,0], [0,1,0], [0,0,0], [0,0,0], [0,0,0]],
    '%': [[1,0,1], [0,0,1], [0,1,0], [1,0,0], [1,0,1]],
    '[': [[1,1,0], [1,0,0], [1,0,0], [1,0,0], [1,1,0]],
    ']': [[0,1,1], [0,0,1], [0,0,1], [0,0,1], [0,1,1]],
}
