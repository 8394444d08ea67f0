# ============================================================================
# src/health_insights/extractors/ocr_extractor.py
# ============================================================================
"""
Attachment OCR

Best-effort text extraction for image attachments (JPG/PNG) before the
provider prompt is built. PDFs are never extracted.

Every failure (bad URL, non-2xx fetch, undecodable image, missing
tesseract binary) yields None; the caller simply prompts without a snippet.
"""

import asyncio
import io
import logging
import re
from typing import Any, Dict, Optional

import aiohttp
import pytesseract
from PIL import Image

from ..core.config import merge_config
from ..utils.exceptions import OCRError

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")
_HTTP_URL = re.compile(r"^https?:", re.I)


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE.sub(" ", text or "").strip()


def truncate_snippet(text: str, limit: int = 2000) -> str:
    """First `limit` chars of OCR text, with an ellipsis when cut."""
    if len(text) <= limit:
        return text
    return text[:limit] + "…"


class OCRExtractor:
    """
    Fetches an attachment by URL and runs Tesseract over it.

    Config options:
        ocr_language: Tesseract language pack (default: eng)
        provider_timeout: Total fetch timeout in seconds (default: aiohttp's)
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = merge_config(config)
        self.language = self.config.get('ocr_language', 'eng')
        self.timeout = self.config.get('provider_timeout')

    async def fetch_image(self, url: str) -> bytes:
        """
        Raises:
            OCRError: non-2xx response
        """
        timeout = aiohttp.ClientTimeout(total=self.timeout) if self.timeout else None
        session_kwargs = {'timeout': timeout} if timeout else {}
        async with aiohttp.ClientSession(**session_kwargs) as session:
            async with session.get(url) as response:
                if not 200 <= response.status < 300:
                    raise OCRError(f"Attachment fetch failed with status {response.status}")
                return await response.read()

    def recognize(self, image_bytes: bytes) -> str:
        """Run Tesseract over raw image bytes (blocking)."""
        with Image.open(io.BytesIO(image_bytes)) as image:
            if image.mode not in ('RGB', 'L'):
                image = image.convert('RGB')
            return pytesseract.image_to_string(image, lang=self.language)

    async def extract_text(self, url: Optional[str]) -> Optional[str]:
        """
        Extract text from the image at `url`.

        Returns:
            Whitespace-collapsed text, or None when nothing usable came back
        """
        if not url or not _HTTP_URL.match(url):
            return None

        try:
            logger.info(f"Starting OCR for attachment: {url}")
            image_bytes = await self.fetch_image(url)
            raw_text = await asyncio.to_thread(self.recognize, image_bytes)
        except Exception as e:
            logger.warning(f"OCR failed, continuing without extracted text: {e}")
            return None

        cleaned = collapse_whitespace(raw_text)
        logger.info(f"OCR extracted {len(cleaned)} chars")
        return cleaned or None
