"""
OpenAI binding for screenshot analysis.
"""

from typing import Optional

from app.image_processing.loading import encode_image_to_data_url
from app.providers.base import AnalysisProvider
from app.providers.prompts import SYSTEM_PROMPT


class OpenAIProvider(AnalysisProvider):
    name = "openai"

    def _request(self, image_bytes: bytes, mime_type: str, prompt: str) -> Optional[str]:
        response = self.client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {
                    "role": "user",
                    "content": [
                        {"type": "text", "text": prompt},
                        {
                            "type": "image_url",
                            "image_url": {
                                "url": encode_image_to_data_url(image_bytes, mime_type),
                                "detail": "high",
                            },
                        },
                    ],
                },
            ],
            response_format={"type": "json_object"},
            temperature=0.1,
        )
        if not response.choices:
            return None
        return response.choices[0].message.content
