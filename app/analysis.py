"""
Screenshot analysis entry point: picks a provider and runs it.
"""

import logging
from typing import Dict, List, Optional

from app import config
from app.errors import UnknownProviderError
from app.providers.base import AnalysisProvider
from app.providers.gemini_provider import GeminiProvider
from app.providers.openai_provider import OpenAIProvider
from app.schemas import AnalysisResult, MinimapBounds, ProviderInfo

logger = logging.getLogger(__name__)


def _build_providers() -> Dict[str, AnalysisProvider]:
    # Read clients at call time so a reloaded config is picked up
    return {
        GeminiProvider.name: GeminiProvider(config.gemini_client, config.GEMINI_MODEL),
        OpenAIProvider.name: OpenAIProvider(config.openai_client, config.OPENAI_MODEL),
    }


def get_provider(name: Optional[str] = None) -> AnalysisProvider:
    """
    Look up a provider by tag.

    Args:
        name: "gemini" or "openai"; the configured default when omitted

    Raises:
        UnknownProviderError: If no provider has that tag
    """
    name = (name or config.DEFAULT_PROVIDER).lower()
    providers = _build_providers()
    if name not in providers:
        raise UnknownProviderError(
            f"Unknown provider {name!r}, expected one of: {', '.join(sorted(providers))}"
        )
    return providers[name]


def list_providers() -> List[ProviderInfo]:
    return [
        ProviderInfo(name=provider.name, model=provider.model, configured=provider.configured)
        for provider in _build_providers().values()
    ]


def analyze_screenshot(
    image_bytes: bytes,
    mime_type: str = "image/png",
    manual_bounds: Optional[MinimapBounds] = None,
    provider: Optional[str] = None,
) -> AnalysisResult:
    """
    Analyze one screenshot with the chosen provider.

    Args:
        image_bytes: Encoded screenshot
        mime_type: MIME type of image_bytes
        manual_bounds: Optional user-drawn minimap rectangle; overrides the model's guess
        provider: Provider tag, defaults to DEFAULT_PROVIDER

    Returns:
        Normalized analysis result

    Raises:
        UnknownProviderError: If the provider tag is not recognised
        AnalysisError: If the analysis fails for any reason
    """
    selected = get_provider(provider)
    result = selected.analyze(image_bytes, mime_type, manual_bounds)
    logger.info(f"{selected.name} analysis complete: {result.map_name}, {len(result.players)} players")
    return result
