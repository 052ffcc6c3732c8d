"""
Photo optimizer (Image bytes → smaller JPEG bytes).

Photos are fitted inside a 1200×1200 box (never enlarged) and
re-encoded as JPEG at quality 85 before they are committed to the
website repository.
"""

import io

from PIL import Image, ImageOps

MAX_DIMENSION = 1200
JPEG_QUALITY = 85


def optimize_image(image_bytes: bytes) -> bytes:
    """
    Resize and re-encode a photo.

    Args:
        image_bytes (bytes): Raw image as downloaded from Telegram.

    Returns:
        bytes: JPEG bytes no larger than MAX_DIMENSION on either axis.

    Raises:
        PIL.UnidentifiedImageError: If the bytes are not a readable image.
    """
    with Image.open(io.BytesIO(image_bytes)) as img:
        img = ImageOps.exif_transpose(img)

        if img.mode not in ("RGB", "L"):
            # JPEG has no alpha channel: flatten onto white.
            rgba = img.convert("RGBA")
            background = Image.new("RGB", rgba.size, (255, 255, 255))
            background.paste(rgba, mask=rgba.getchannel("A"))
            img = background

        # thumbnail() keeps the aspect ratio and never upscales.
        img.thumbnail((MAX_DIMENSION, MAX_DIMENSION), Image.LANCZOS)

        out = io.BytesIO()
        img.save(out, format="JPEG", quality=JPEG_QUALITY, optimize=True)
        return out.getvalue()
