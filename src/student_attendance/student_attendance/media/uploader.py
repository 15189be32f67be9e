from __future__ import annotations

import base64
import logging
from dataclasses import dataclass
from typing import Optional, Protocol

import cloudinary
import cloudinary.uploader
from werkzeug.datastructures import FileStorage

from ..core.exceptions import StoreError

logger = logging.getLogger(__name__)


@dataclass
class CloudinaryConfig:
    cloud_name: str
    api_key: str
    api_secret: str


class PhotoUploader(Protocol):
    def upload(self, photo: FileStorage, *, folder: Optional[str] = None) -> str:
        """Store the photo and return its public (secure) URL."""

        raise NotImplementedError


class CloudinaryPhotoUploader(PhotoUploader):
    """Uploads in-memory photos to Cloudinary as base64 data URIs."""

    def __init__(self, config: CloudinaryConfig):
        cloudinary.config(
            cloud_name=config.cloud_name,
            api_key=config.api_key,
            api_secret=config.api_secret,
            secure=True,
        )

    def upload(self, photo: FileStorage, *, folder: Optional[str] = None) -> str:
        b64 = base64.b64encode(photo.read()).decode("ascii")
        data_uri = f"data:{photo.mimetype or 'application/octet-stream'};base64,{b64}"
        options = {"folder": folder} if folder else {}
        try:
            result = cloudinary.uploader.upload(data_uri, **options)
        except Exception as e:
            logger.error("Photo upload failed: %s", e)
            raise StoreError(str(e)) from e
        return result["secure_url"]
