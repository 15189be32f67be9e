import os

from .config import MAX_CONTENT_LENGTH, cloudinary_config_from_env, cors_origins_from_env, firebase_config_from_env

FIREBASE_CONFIG = firebase_config_from_env()
CLOUDINARY_CONFIG = cloudinary_config_from_env()

CORS_ORIGINS = cors_origins_from_env()
PORT = int(os.getenv("PORT", "3000"))

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
