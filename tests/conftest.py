import io
import json
from types import SimpleNamespace

import pytest
from PIL import Image

HAVEN_RESPONSE = {
    "mapName": "Haven",
    "minimapLocation": {"xmin": 0, "ymin": 0, "xmax": 200, "ymax": 200},
    "detectedIcons": [
        {"team": "Red", "boundingBox": {"xmin": 50, "ymin": 50, "xmax": 70, "ymax": 70}},
        {"team": "Blue", "boundingBox": {"xmin": 900, "ymin": 900, "xmax": 920, "ymax": 920}},
    ],
    "summary": "s",
}


def make_image_bytes(width=200, height=100, color=(0, 0, 0), fmt="PNG"):
    img = Image.new("RGB", (width, height), color)
    buffer = io.BytesIO()
    img.save(buffer, format=fmt)
    return buffer.getvalue()


class FakeGeminiClient:
    """Stands in for google.genai.Client; records generate_content calls."""

    def __init__(self, text=None, error=None):
        self.calls = []
        self._text = text
        self._error = error
        self.models = SimpleNamespace(generate_content=self._generate_content)

    def _generate_content(self, **kwargs):
        self.calls.append(kwargs)
        if self._error:
            raise self._error
        return SimpleNamespace(text=self._text)


class FakeOpenAIClient:
    """Stands in for openai.OpenAI; records chat.completions.create calls."""

    def __init__(self, content=None, error=None, choices=True):
        self.calls = []
        self._content = content
        self._error = error
        self._choices = choices
        self.chat = SimpleNamespace(completions=SimpleNamespace(create=self._create))

    def _create(self, **kwargs):
        self.calls.append(kwargs)
        if self._error:
            raise self._error
        if not self._choices:
            return SimpleNamespace(choices=[])
        return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=self._content))])


@pytest.fixture
def png_bytes():
    return make_image_bytes()


@pytest.fixture
def haven_text():
    return json.dumps(HAVEN_RESPONSE)
