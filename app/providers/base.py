"""
Common behaviour for hosted multimodal analysis providers.
"""

import logging
from typing import Any, Optional

from app.errors import AnalysisError, ProviderError, ProviderNotConfiguredError
from app.image_processing.bounding_box import normalize_analysis
from app.providers.prompts import build_analysis_prompt
from app.schemas import AnalysisResult, MinimapBounds
from app.utils.parsing import parse_raw_analysis

logger = logging.getLogger(__name__)


class AnalysisProvider:
    """
    One hosted model binding.

    Subclasses only know how to send a prompt and an image to their API and
    return the reply text; parsing and normalization happen here, once.
    """

    name = "base"

    def __init__(self, client: Any, model: str):
        self.client = client
        self.model = model

    @property
    def configured(self) -> bool:
        return self.client is not None

    def _request(self, image_bytes: bytes, mime_type: str, prompt: str) -> Optional[str]:
        raise NotImplementedError

    def analyze(
        self,
        image_bytes: bytes,
        mime_type: str = "image/png",
        manual_bounds: Optional[MinimapBounds] = None,
    ) -> AnalysisResult:
        """
        Run one analysis request and normalize the reply.

        Args:
            image_bytes: Encoded screenshot
            mime_type: MIME type of image_bytes
            manual_bounds: Optional user-drawn minimap rectangle

        Returns:
            Normalized analysis result

        Raises:
            AnalysisError: On any failure; there is no partial result
        """
        if not self.configured:
            raise ProviderNotConfiguredError(f"{self.name} API key is not configured")

        prompt = build_analysis_prompt(manual_bounds)
        logger.info(
            f"Requesting analysis from {self.name} ({self.model}), "
            f"manual bounds: {manual_bounds is not None}"
        )

        try:
            response_text = self._request(image_bytes, mime_type, prompt)
        except AnalysisError:
            raise
        except Exception as e:
            logger.error(f"Error calling {self.name} API: {e}", exc_info=True)
            raise ProviderError(f"{self.name} request failed: {e}") from e

        raw = parse_raw_analysis(response_text or "")
        return normalize_analysis(raw, manual_bounds)
