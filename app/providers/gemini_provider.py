"""
Gemini binding for screenshot analysis.
"""

from typing import Optional

from google.genai import types

from app.providers.base import AnalysisProvider

_BOX_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "ymin": types.Schema(type=types.Type.INTEGER),
        "xmin": types.Schema(type=types.Type.INTEGER),
        "ymax": types.Schema(type=types.Type.INTEGER),
        "xmax": types.Schema(type=types.Type.INTEGER),
    },
    required=["ymin", "xmin", "ymax", "xmax"],
)

RESPONSE_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "mapName": types.Schema(
            type=types.Type.STRING,
            description="Name of the map (e.g. Haven, Ascent)",
        ),
        "minimapLocation": types.Schema(
            type=types.Type.OBJECT,
            description="Bounding box of the minimap on the full image (0-1000 scale)",
            properties=_BOX_SCHEMA.properties,
            required=_BOX_SCHEMA.required,
        ),
        "detectedIcons": types.Schema(
            type=types.Type.ARRAY,
            items=types.Schema(
                type=types.Type.OBJECT,
                properties={
                    "team": types.Schema(
                        type=types.Type.STRING,
                        description="Team color or side (e.g. Red, Blue, Attacker)",
                    ),
                    "agentGuess": types.Schema(
                        type=types.Type.STRING,
                        description="Best guess of agent name if icon is clear",
                    ),
                    "boundingBox": _BOX_SCHEMA,
                },
                required=["team", "boundingBox"],
            ),
        ),
        "summary": types.Schema(
            type=types.Type.STRING,
            description="A brief tactical summary of the positions",
        ),
    },
    required=["mapName", "detectedIcons", "summary"],
)


class GeminiProvider(AnalysisProvider):
    name = "gemini"

    def _request(self, image_bytes: bytes, mime_type: str, prompt: str) -> Optional[str]:
        parts = [
            types.Part.from_bytes(data=image_bytes, mime_type=mime_type),
            types.Part.from_text(text=prompt),
        ]
        response = self.client.models.generate_content(
            model=self.model,
            contents=parts,
            config=types.GenerateContentConfig(
                response_mime_type="application/json",
                response_schema=RESPONSE_SCHEMA,
                temperature=0.1,
            ),
        )
        return response.text
