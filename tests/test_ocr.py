"""Tests for the OCR service."""

import base64
from unittest.mock import MagicMock, Mock, patch

import pytest

from hypelens.core.config import settings
from hypelens.core.errors import OCRFailure
from hypelens.services.ocr import (
    OCRServiceFactory,
    OpenAIVisionOCRService,
    UnavailableOCRService,
)


def _response(content):
    response = MagicMock()
    response.choices[0].message.content = content
    return response


class TestOCRServiceFactory:
    """Test backend selection."""

    def test_without_key(self):
        with patch('hypelens.services.ocr.settings') as mock_settings:
            mock_settings.openai_api_key = ""
            service = OCRServiceFactory.create()
        assert isinstance(service, UnavailableOCRService)
        assert not service.available

    @patch('hypelens.services.ocr.openai')
    def test_with_key(self, mock_openai):
        with patch('hypelens.services.ocr.settings') as mock_settings:
            mock_settings.openai_api_key = "test_key"
            mock_settings.ocr_model = "gpt-4o-mini"
            service = OCRServiceFactory.create()

        assert isinstance(service, OpenAIVisionOCRService)
        mock_openai.OpenAI.assert_called_once_with(api_key="test_key")
        assert service.model == "gpt-4o-mini"


class TestUnavailableOCRService:

    def test_always_fails(self):
        with pytest.raises(OCRFailure, match="not configured"):
            UnavailableOCRService().extract_text(b"png-bytes")


class TestOpenAIVisionOCRService:
    """Test request building and failure handling with a mocked client."""

    def setup_method(self):
        self.client = Mock()
        self.service = OpenAIVisionOCRService(client=self.client, model="vision-test")

    def test_extract_text(self):
        self.client.chat.completions.create.return_value = _response("  To the moon \n")

        text = self.service.extract_text(b"png-bytes", "image/jpeg")

        assert text == "To the moon"
        kwargs = self.client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "vision-test"
        image_part = kwargs["messages"][0]["content"][1]
        expected = "data:image/jpeg;base64," + base64.b64encode(b"png-bytes").decode("ascii")
        assert image_part["image_url"]["url"] == expected

    def test_empty_content(self):
        self.client.chat.completions.create.return_value = _response(None)
        assert self.service.extract_text(b"png-bytes") == ""

    def test_empty_image(self):
        with pytest.raises(OCRFailure):
            self.service.extract_text(b"")
        self.client.chat.completions.create.assert_not_called()

    @patch("time.sleep")
    def test_retries_then_fails(self, mock_sleep):
        self.client.chat.completions.create.side_effect = RuntimeError("rate limited")

        with pytest.raises(OCRFailure) as excinfo:
            self.service.extract_text(b"png-bytes")

        assert isinstance(excinfo.value.__cause__, RuntimeError)
        assert self.client.chat.completions.create.call_count == settings.max_retries

    @patch("time.sleep")
    def test_recovers_after_transient_error(self, mock_sleep):
        self.client.chat.completions.create.side_effect = [
            RuntimeError("timeout"),
            _response("moon"),
        ]
        assert self.service.extract_text(b"png-bytes") == "moon"


if __name__ == "__main__":
    pytest.main([__file__])
