"""
JSON parsing utilities for provider responses.
"""

import json
import re
from typing import Dict

from pydantic import ValidationError

from app.errors import ResponseParseError
from app.schemas import RawAnalysisResponse


def parse_json_response(response_text: str) -> Dict:
    """
    Parse a JSON object from a provider's text response.
    Handles markdown code fences and text around the object.

    Args:
        response_text: Raw text response from the provider

    Returns:
        Parsed JSON dictionary

    Raises:
        ResponseParseError: If the text is empty or holds no JSON object
    """
    if not response_text or not response_text.strip():
        raise ResponseParseError("Provider returned an empty response")

    # Outermost {...} first, so fenced or prefixed replies still parse
    json_match = re.search(r'\{[\s\S]*\}', response_text)
    if json_match:
        try:
            return json.loads(json_match.group())
        except json.JSONDecodeError:
            pass

    try:
        result = json.loads(response_text)
    except json.JSONDecodeError as e:
        raise ResponseParseError(f"Could not parse JSON from provider response: {e}")

    if not isinstance(result, dict):
        raise ResponseParseError(f"Expected a JSON object, got {type(result).__name__}")
    return result


def parse_raw_analysis(response_text: str) -> RawAnalysisResponse:
    """
    Parse and validate a provider reply against the analysis response shape.

    Raises:
        ResponseParseError: If the reply is not JSON or misses required fields
    """
    data = parse_json_response(response_text)
    try:
        return RawAnalysisResponse.model_validate(data)
    except ValidationError as e:
        raise ResponseParseError(f"Provider response does not match the analysis schema: {e}") from e
