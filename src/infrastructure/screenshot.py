"""Screenshot adapters producing base64 PNG content."""

import base64
import binascii
from typing import Any

from loguru import logger

PNG_DATA_URL_PREFIX = "data:image/png;base64,"


class ScreenshotError(ValueError):
    """Screenshot source could not be turned into an image."""

    pass


class DataURLScreenshotCapture:
    """Accepts the data URL a browser tab capture returns and extracts its payload."""

    async def capture(self, source: Any) -> str:
        if not isinstance(source, str) or not source.startswith(PNG_DATA_URL_PREFIX):
            raise ScreenshotError("Screenshot source is not a PNG data URL")

        payload = source.split(",", 1)[1]
        try:
            base64.b64decode(payload, validate=True)
        except binascii.Error as e:
            raise ScreenshotError(f"Screenshot payload is not valid base64: {e}") from e

        logger.debug(f"Captured screenshot ({len(payload)} base64 chars)")
        return payload
