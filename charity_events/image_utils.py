import io
import logging
import uuid
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from charity_events.config import config
from charity_events.exceptions import ValidationError

# Pillow format name -> stored file extension
FORMAT_EXTENSIONS = {"JPEG": ".jpg", "PNG": ".png", "GIF": ".gif", "WEBP": ".webp", "BMP": ".bmp"}


def check_image(data, content_type):
    """
    Makes sure an upload really is an image, without re-encoding it.

    :param data: The raw bytes of the uploaded file.
    :param content_type: The content type declared by the client.
    :return: The Pillow format name (e.g. 'PNG').
    """
    if not content_type or not content_type.startswith("image/"):
        raise ValidationError("Only image files are allowed")
    if len(data) > config.MAX_IMAGE_SIZE:
        raise ValidationError("Image exceeds the maximum size of 2MB")

    try:
        img = Image.open(io.BytesIO(data))
        img.verify()
    except (UnidentifiedImageError, OSError, SyntaxError) as e:
        logging.warning(f"Rejected upload that is not a readable image: {e}")
        raise ValidationError("Only image files are allowed")
    return img.format


def save_image(data, content_type, upload_dir=None):
    """
    Stores an uploaded image under a unique name.

    :return: The public path of the stored file, e.g. '/img/<name>.png'.
    """
    image_format = check_image(data, content_type)

    # The extension follows the decoded format, never the client-supplied name
    ext = FORMAT_EXTENSIONS.get(image_format, "." + image_format.lower())

    target_dir = Path(upload_dir or config.UPLOAD_DIR)
    target_dir.mkdir(parents=True, exist_ok=True)
    filename = f"{uuid.uuid4().hex}{ext}"
    (target_dir / filename).write_bytes(data)

    logging.info(f"Image stored as {filename} ({len(data)} bytes)")
    return f"/img/{filename}"
