"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from environment
variables.  Defaults are provided for all fields so the API starts
without any configuration; in a production deployment you should at
least override ``JWT_SECRET`` and the admin credentials.
"""

import os
from dataclasses import dataclass


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Pan Eventz API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_bool("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Token signing.  The default secret is kept for compatibility with
    # tokens issued by earlier deployments; always override it.
    jwt_secret: str = os.getenv("JWT_SECRET", "pan-eventz-secret-key")
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(8 * 60)))

    # The single administrator account.  It is inserted into the users
    # table of the in-memory database when the application starts.
    admin_username: str = os.getenv("ADMIN_USERNAME", "eventninja12@")
    admin_password: str = os.getenv("ADMIN_PASSWORD", "9323641780")
    admin_name: str = os.getenv("ADMIN_NAME", "Admin User")

    # Directory holding one ``<collection>.json`` file per file-backed
    # collection.  Relative paths are resolved against the working
    # directory, like the uploads directory below.
    data_dir: str = os.getenv("DATA_DIR", "data")
    uploads_dir: str = os.getenv("UPLOADS_DIR", "uploads")
    max_upload_size: int = int(os.getenv("MAX_UPLOAD_SIZE", str(10 * 1024 * 1024)))

    # Comma-separated list of allowed origins for the browser clients.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    cloudinary_cloud_name: str = os.getenv("CLOUDINARY_CLOUD_NAME", "")
    cloudinary_api_key: str = os.getenv("CLOUDINARY_API_KEY", "")
    cloudinary_api_secret: str = os.getenv("CLOUDINARY_API_SECRET", "")

    # Load the sample services, slides, technologies, about page and
    # stats into the in-memory database on start-up.
    seed_mock_db: bool = _env_bool("SEED_MOCK_DB", "true")

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
