import os

# Service-account fields, read one variable per key (no JSON file on disk).
FIREBASE_ENV_KEYS = (
    "project_id",
    "private_key_id",
    "private_key",
    "client_email",
    "client_id",
    "auth_uri",
    "token_uri",
    "auth_provider_x509_cert_url",
    "client_x509_cert_url",
    "universe_domain",
)


def firebase_config_from_env() -> dict:
    config = {key: os.getenv(key) for key in FIREBASE_ENV_KEYS}
    config["universe_domain"] = config["universe_domain"] or "googleapis.com"
    return config


def cloudinary_config_from_env() -> dict:
    return {
        "cloud_name": os.getenv("CLOUDINARY_CLOUD_NAME", ""),
        "api_key": os.getenv("CLOUDINARY_API_KEY", ""),
        "api_secret": os.getenv("CLOUDINARY_API_SECRET", ""),
    }


def cors_origins_from_env(default: str = "*"):
    value = os.getenv("CORS_ORIGINS", default).strip()
    if value == "*":
        return "*"
    return [o.strip() for o in value.split(",") if o.strip()]


# Multipart bodies carry student photos.
MAX_CONTENT_LENGTH = 10 * 1024 * 1024
