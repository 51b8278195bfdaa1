"""OCR service: extracts promotion text from screenshots."""

import base64
import logging

import openai
from tenacity import retry, stop_after_attempt, wait_exponential

from ..core.config import settings
from ..core.constants import OCRConstants
from ..core.errors import OCRFailure

logger = logging.getLogger(__name__)


class OCRServiceFactory:
    """Factory for creating OCR services."""

    @staticmethod
    def create():
        """Create appropriate OCR service."""
        if settings.openai_api_key:
            return OpenAIVisionOCRService()
        else:
            return UnavailableOCRService()


class UnavailableOCRService:
    """Used when no OCR backend is configured; every call fails."""

    available = False

    def extract_text(self, image_bytes: bytes, mime_type: str = OCRConstants.DEFAULT_MIME_TYPE) -> str:
        raise OCRFailure("OCR is not configured; set OPENAI_API_KEY to read images")


class OpenAIVisionOCRService:
    """OCR through an OpenAI vision-capable chat model."""

    available = True

    def __init__(self, client=None, model: str = None):
        self.client = client or openai.OpenAI(api_key=settings.openai_api_key)
        self.model = model or settings.ocr_model
        logger.info(f"OpenAI OCR service initialized with model={self.model}")

    def extract_text(self, image_bytes: bytes, mime_type: str = OCRConstants.DEFAULT_MIME_TYPE) -> str:
        """Best-effort text from an image; raises OCRFailure on any error."""
        if not image_bytes:
            raise OCRFailure("Empty image")

        encoded = base64.b64encode(image_bytes).decode("ascii")
        data_url = f"data:{mime_type};base64,{encoded}"

        try:
            text = self._request(data_url)
        except Exception as e:
            logger.error(f"OCR failed after {settings.max_retries} attempts: {e}")
            raise OCRFailure(f"Could not read text from image: {e}") from e

        logger.debug(f"OCR extracted {len(text)} chars")
        return text

    @retry(
        stop=stop_after_attempt(settings.max_retries),
        wait=wait_exponential(multiplier=settings.retry_delay, max=settings.retry_backoff * 10),
        reraise=True,
    )
    def _request(self, data_url: str) -> str:
        response = self.client.chat.completions.create(
            model=self.model,
            messages=[
                {
                    "role": "user",
                    "content": [
                        {"type": "text", "text": OCRConstants.OCR_PROMPT},
                        {"type": "image_url", "image_url": {"url": data_url}},
                    ],
                }
            ],
            max_tokens=OCRConstants.OCR_MAX_TOKENS,
            temperature=OCRConstants.OCR_TEMPERATURE,
            timeout=settings.ocr_timeout,
        )
        content = response.choices[0].message.content
        return (content or "").strip()
