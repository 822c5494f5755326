# app/shared/services/cloudinary_service.py

import cloudinary
import cloudinary.uploader
from fastapi import UploadFile, HTTPException
from starlette.concurrency import run_in_threadpool
from app.config.settings import settings
import re
import uuid
import logging
from datetime import datetime

logger = logging.getLogger(__name__)


class CloudinaryService:

    def __init__(self):
        """Configure the Cloudinary SDK from settings"""
        if not settings.cloudinary_configured:
            logger.warning("⚠️ Cloudinary is not fully configured, image upload disabled")
            self.configured = False
            return

        cloudinary.config(
            cloud_name=settings.cloudinary_cloud_name,
            api_key=settings.cloudinary_api_key,
            api_secret=settings.cloudinary_api_secret,
            secure=True
        )

        self.configured = True
        logger.info("✅ Cloudinary configured")

    async def upload_image(self, image_file: UploadFile) -> str:
        """
        Upload an image to Cloudinary

        Args:
            image_file: Multipart image to upload

        Returns:
            str: Secure URL of the hosted image

        Raises:
            HTTPException: 400 for a non-image or oversized file, 500 on upload failure
        """
        if not self.configured:
            raise HTTPException(
                status_code=500,
                detail="Image storage is not configured"
            )

        # Validate file type
        if not image_file.content_type or not image_file.content_type.startswith('image/'):
            raise HTTPException(
                status_code=400,
                detail="File must be a valid image"
            )

        # Validate size
        if image_file.size is not None and image_file.size > settings.max_image_size:
            raise HTTPException(
                status_code=400,
                detail=f"Image must not exceed {settings.max_image_size // (1024*1024)}MB"
            )

        try:
            file_id = str(uuid.uuid4())[:8]
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            safe_name = self._sanitize_filename(image_file.filename or "")
            public_id = f"{safe_name}_{timestamp}_{file_id}"

            await image_file.seek(0)
            file_content = await image_file.read()

            logger.info(f"📤 Uploading image: {public_id}")

            result = await run_in_threadpool(
                cloudinary.uploader.upload,
                file_content,
                public_id=public_id,
                folder=f"{settings.cloudinary_folder}/uploads",
                resource_type="image",
                overwrite=False,
                unique_filename=True,
                use_filename=False
            )

            if 'secure_url' not in result:
                raise Exception("Cloudinary returned no secure URL")

            logger.info(f"✅ Image uploaded: {result['secure_url']} ({result.get('bytes', 0)} bytes)")

            return result["secure_url"]

        except Exception as e:
            logger.error(f"❌ Error uploading image to Cloudinary: {str(e)}")
            raise HTTPException(
                status_code=500,
                detail=f"Image upload failed: {str(e)}"
            )

    def _sanitize_filename(self, filename: str) -> str:
        """Make a filename safe for use as a Cloudinary public_id"""
        stem = filename.rsplit(".", 1)[0]
        sanitized = re.sub(r'[^a-zA-Z0-9_-]', '_', stem)[:50]
        return sanitized or "image"


# ==================== SERVICE INSTANCE ====================

cloudinary_service = CloudinaryService()


def get_image_store() -> CloudinaryService:
    return cloudinary_service
