# charity_events/routes/uploads.py
from typing import Optional
from fastapi import APIRouter, UploadFile, File
from fastapi.concurrency import run_in_threadpool

from charity_events.config import config
from charity_events.exceptions import ValidationError
from charity_events.image_utils import save_image

router = APIRouter(
    tags=["Uploads"],
)


@router.post("/upload/image")
async def upload_image(image: Optional[UploadFile] = File(None)):
    """
    Stores one image (max 2MB) and returns the path it is served from.
    """
    if image is None or not image.filename:
        raise ValidationError("No file uploaded")

    # One byte past the limit is enough to know it is too big
    data = await image.read(config.MAX_IMAGE_SIZE + 1)
    image_path = await run_in_threadpool(save_image, data, image.content_type)
    return {"message": "Image uploaded", "imagePath": image_path}
