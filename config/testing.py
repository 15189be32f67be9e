from .config import MAX_CONTENT_LENGTH

FIREBASE_CONFIG = {"project_id": "test-project"}
CLOUDINARY_CONFIG = {"cloud_name": "test", "api_key": "test", "api_secret": "test"}

CORS_ORIGINS = "*"
PORT = 3000

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
