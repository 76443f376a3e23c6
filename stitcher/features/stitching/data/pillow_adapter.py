import io
import logging
import os
import tempfile
from pathlib import Path
from typing import List, Optional, Sequence

from PIL import Image

from stitcher.core.common.enums import Direction
from stitcher.core.common.errors import JobExecutionError
from ..domain.interfaces import IStitchBackend

ALPHA_MODES = {"RGBA", "LA", "PA", "RGBa", "La"}


class PillowStitchAdapter(IStitchBackend):
    """
    Concrete implementation of IStitchBackend using Pillow.
    Images are appended edge to edge, anchored at the top (horizontal) or
    left (vertical). Nothing is resized.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def stitch(self, paths: Sequence[Path], direction: Direction) -> bytes:
        if not paths:
            raise ValueError("stitch() needs at least one input image")

        image_format = self._format_for(paths[0])
        images = []

        try:
            for path in paths:
                images.append(self._load(path))

            mode = self._common_mode(images, image_format)
            for i, img in enumerate(images):
                if img.mode != mode:
                    images[i] = img.convert(mode)
                    img.close()

            if direction == Direction.HORIZONTAL:
                size = (sum(img.width for img in images), max(img.height for img in images))
            else:
                size = (max(img.width for img in images), sum(img.height for img in images))

            canvas = Image.new(mode, size)
            offset = 0
            for img in images:
                if direction == Direction.HORIZONTAL:
                    canvas.paste(img, (offset, 0))
                    offset += img.width
                else:
                    canvas.paste(img, (0, offset))
                    offset += img.height

            buffer = io.BytesIO()
            canvas.save(buffer, format=image_format)
        except (OSError, ValueError) as e:
            raise JobExecutionError(f"Could not encode {image_format} composite: {e}") from e
        finally:
            for img in images:
                img.close()

        self.logger.debug(f"Composed {len(paths)} image(s) into {size[0]}x{size[1]} {image_format}")
        return buffer.getvalue()

    def write_atomically(self, path: Path, data: bytes) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)

        # Hidden temp file in the target directory so os.replace stays on one filesystem
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(data)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, path)
        except OSError as e:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise JobExecutionError(f"Could not write {path}: {e}") from e

    @staticmethod
    def _format_for(path: Path) -> str:
        image_format = Image.registered_extensions().get(path.suffix.lower())
        if image_format is None:
            raise JobExecutionError(f"No Pillow encoder registered for '{path.suffix}'")
        return image_format

    @staticmethod
    def _load(path: Path) -> Image.Image:
        try:
            with Image.open(path) as img:
                return img.copy()
        except (OSError, Image.DecompressionBombError) as e:
            raise JobExecutionError(f"Could not read image {path}: {e}") from e

    @staticmethod
    def _common_mode(images: List[Image.Image], image_format: str) -> str:
        mode = images[0].mode
        if mode != "P" and all(img.mode == mode for img in images):
            return mode

        # Mixed modes or palettes: fall back to a true-colour canvas
        has_alpha = any(img.mode in ALPHA_MODES or "transparency" in img.info for img in images)
        if has_alpha and image_format != "JPEG":
            return "RGBA"
        return "RGB"
