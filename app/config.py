"""
Configuration and initialization for Valomap Analyst.
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from google import genai
from openai import OpenAI

logger = logging.getLogger(__name__)

# Load environment variables
load_dotenv()

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")

OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o")

DEFAULT_PROVIDER = os.getenv("DEFAULT_PROVIDER", "gemini").lower()

# Box coordinates are reported on a 0-1000 scale of the full screenshot
COORDINATE_SCALE = 1000
# Smallest accepted manual selection, per axis, on that scale
MIN_SELECTION_SIZE = 20

if GEMINI_API_KEY:
    try:
        gemini_client = genai.Client(api_key=GEMINI_API_KEY)
    except Exception as e:
        logger.warning(f"Failed to initialize Gemini client: {e}")
        gemini_client = None
else:
    logger.warning("GEMINI_API_KEY not found in environment")
    gemini_client = None

if OPENAI_API_KEY:
    try:
        openai_client = OpenAI(api_key=OPENAI_API_KEY)
    except Exception as e:
        logger.warning(f"Failed to initialize OpenAI client: {e}")
        openai_client = None
else:
    logger.warning("OPENAI_API_KEY not found in environment")
    openai_client = None

# Base directories
BASE_DIR = Path(__file__).parent.parent
STATIC_DIR = BASE_DIR / "static"

STATIC_DIR.mkdir(exist_ok=True)
