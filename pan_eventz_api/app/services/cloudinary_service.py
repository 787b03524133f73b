"""
Read-only proxy to the Cloudinary Admin API.

The public media pages list the images of a Cloudinary asset folder.
Browsers cannot call the Admin API directly (it needs the API secret),
so the backend fetches the folder listing with HTTP basic auth and
returns the ``resources`` array.
"""

import logging
from typing import Any, Dict, List

import requests

from pan_eventz_api.app.core.config import Settings


logger = logging.getLogger(__name__)

API_URL = "https://api.cloudinary.com/v1_1/{cloud}/resources/by_asset_folder"
MAX_RESULTS = 500
TIMEOUT = 15


class CloudinaryNotConfigured(RuntimeError):
    """Cloud name, API key or API secret is missing."""


class CloudinaryService:
    """Lists the resources of a Cloudinary asset folder."""

    def __init__(self, settings: Settings) -> None:
        self.cloud_name = settings.cloudinary_cloud_name
        self.api_key = settings.cloudinary_api_key
        self.api_secret = settings.cloudinary_api_secret

    @property
    def configured(self) -> bool:
        return bool(self.cloud_name and self.api_key and self.api_secret)

    async def list_folder(self, folder: str) -> List[Dict[str, Any]]:
        """Return the resources stored in ``folder``.

        Raises ``CloudinaryNotConfigured`` when credentials are missing
        and ``requests.RequestException`` when the upstream call fails.
        """
        if not self.configured:
            raise CloudinaryNotConfigured("Cloudinary credentials are not set in environment variables.")
        response = requests.get(
            API_URL.format(cloud=self.cloud_name),
            params={"asset_folder": folder, "max_results": MAX_RESULTS},
            auth=(self.api_key, self.api_secret),
            headers={"Content-Type": "application/json"},
            timeout=TIMEOUT,
        )
        response.raise_for_status()
        data = response.json()
        resources = data.get("resources") or []
        logger.info("Fetched %d resources from Cloudinary folder %s", len(resources), folder)
        return resources
