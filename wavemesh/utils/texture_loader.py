"""
Загружает PNG/JPG/TGA → ImageData (сырые байты + размеры + число каналов).
"""

from pathlib import Path
from PIL import Image, ImageOps, UnidentifiedImageError
import numpy as np
from wavemesh.assets.material import ImageData
from wavemesh.errors import TextureLoadError
from wavemesh.utils.logger import logger


def load_texture(path, flip_vertically: bool = True) -> ImageData:
    """
    Декодирует изображение через Pillow.

    Число каналов берётся из самого файла (L → 1, LA → 2, RGB → 3,
    RGBA → 4); палитровые и прочие режимы приводятся к RGBA.
    По‑умолчанию картинка переворачивается по вертикали – так её
    ожидает OpenGL (первая строка байтов = нижняя строка изображения).
    """
    p = Path(path).expanduser()
    if not p.is_file():
        raise TextureLoadError(f"Texture not found: {p}")

    try:
        with Image.open(p) as img:
            if img.mode not in ("L", "LA", "RGB", "RGBA"):
                img = img.convert("RGBA")
            if flip_vertically:
                img = ImageOps.flip(img)
            w, h = img.size
            channels = len(img.getbands())
            img_data = np.array(img, dtype=np.uint8).tobytes()
    except (OSError, UnidentifiedImageError) as exc:
        raise TextureLoadError(f"Could not decode texture {p}: {exc}") from exc

    logger.debug(f"[TextureLoader] Loaded texture {p} ({w}x{h}, {channels} ch)")
    return ImageData(
        name=p.name,
        path=str(p),
        bytes=img_data,
        width=w,
        height=h,
        channels=channels,
    )
