# app/modules/uploads/router.py
from typing import Optional

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status
from pydantic import BaseModel

from app.shared.services.cloudinary_service import CloudinaryService, get_image_store

router = APIRouter()


class ImageUploadResponse(BaseModel):
    imageUrl: str


@router.post("/upload-image", response_model=ImageUploadResponse)
async def upload_image(
    image: Optional[UploadFile] = File(None, description="Image file"),
    image_store: CloudinaryService = Depends(get_image_store)
):
    """
    Upload an image and return its hosted URL

    **Form data:**
    - **image**: the file (jpeg, png, webp...)
    """
    if image is None or not image.filename:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No image file provided"
        )

    image_url = await image_store.upload_image(image)
    return ImageUploadResponse(imageUrl=image_url)
