"""Image loading and caching.

Images are decoded once with Pillow into RGBA numpy arrays and looked up by
their asset id (a path relative to the assets directory, e.g.
``"images/jack.png"``).
"""

from pathlib import Path
from typing import Callable, Dict, Iterable, List
import hashlib
import logging

import numpy as np
from numpy.typing import NDArray
from PIL import Image

from candycorn.graphics.primitives import fill, new_buffer

logger = logging.getLogger(__name__)


IMAGE_ASSETS: List[str] = [
    # Tiles
    'images/stone-block.png',
    'images/water-block.png',
    'images/grass-block.png',
    'images/enemy-bug.png',
    'images/char-boy.png',

    'images/jack.png',

    # OBSTACLES
    # Rocks
    'images/rock-red.png',
    'images/rock-blue.png',
    'images/rock-yellow.png',
    'images/Rock.png',
    'images/pumpkin.png',
    'images/skull.png',
    # Lasers
    'images/laser-left.png',
    'images/laser-right.png',
    # Spider Web
    'images/web.png',

    # COSTUMES
    # LaserMan
    'images/glasses-red.png',
    'images/glasses-blue.png',
    'images/glasses-yellow.png',
    # Dwarf
    'images/dwarf-red.png',
    'images/dwarf-blue.png',
    'images/dwarf-yellow.png',
    # Ghost
    'images/ghost-costume.png',

    # ENEMIES
    'images/ghost-left.png',
    'images/ghost-left-attacking.png',
    'images/ghost-right.png',
    'images/ghost-right-attacking.png',
    'images/spider.png',
    'images/zombie.png',

    # Level finish
    'images/Selector.png',

    'images/candy-corn.png',
]

PLACEHOLDER_SIZE = 101


class Resources:
    """Asset loader with ready callbacks.

    Loading is synchronous, so ``on_ready`` callbacks registered after
    ``load`` fire immediately.
    """

    def __init__(self, assets_path: Path | str):
        self.assets_path = Path(assets_path)
        self._cache: Dict[str, NDArray[np.uint8]] = {}
        self._requested: List[str] = []
        self._ready_callbacks: List[Callable[[], None]] = []

    def load(self, asset_ids: str | Iterable[str]) -> None:
        """Load one asset id or a list of them."""
        if isinstance(asset_ids, str):
            asset_ids = [asset_ids]

        for asset_id in asset_ids:
            if asset_id not in self._requested:
                self._requested.append(asset_id)
            if asset_id not in self._cache:
                self._cache[asset_id] = self._load_image(asset_id)

        logger.info(f"Loaded {len(self._cache)} images from {self.assets_path}")

        if self.is_ready():
            callbacks = list(self._ready_callbacks)
            self._ready_callbacks.clear()
            for callback in callbacks:
                callback()

    def on_ready(self, callback: Callable[[], None]) -> None:
        """Run callback once everything requested so far has loaded."""
        if self.is_ready():
            callback()
        else:
            self._ready_callbacks.append(callback)

    def is_ready(self) -> bool:
        """True when at least one load was requested and all have finished."""
        return bool(self._requested) and all(a in self._cache for a in self._requested)

    def get(self, asset_id: str) -> NDArray[np.uint8]:
        """Get a loaded image, loading it on demand if it was never requested."""
        image = self._cache.get(asset_id)
        if image is None:
            logger.warning(f"Image requested before loading: {asset_id}")
            image = self._cache[asset_id] = self._load_image(asset_id)
        return image

    def _load_image(self, asset_id: str) -> NDArray[np.uint8]:
        path = self.assets_path / asset_id
        try:
            with Image.open(path) as img:
                return np.array(img.convert("RGBA"), dtype=np.uint8)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to load image {asset_id}: {e}")
            return self._placeholder(asset_id)

    @staticmethod
    def _placeholder(asset_id: str) -> NDArray[np.uint8]:
        """A flat tile whose colour is stable for a given asset id."""
        digest = hashlib.md5(asset_id.encode("utf-8")).digest()
        image = new_buffer(PLACEHOLDER_SIZE, PLACEHOLDER_SIZE)
        fill(image, (digest[0], digest[1], digest[2]))
        return image
