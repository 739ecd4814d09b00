"""
Prompt text shared by every analysis provider.
"""

from typing import Optional

from app.schemas import MinimapBounds

SYSTEM_PROMPT = (
    "You are a highly accurate computer vision assistant for Valorant. "
    "You output strictly valid JSON."
)

RESPONSE_SHAPE = """{
  "mapName": "string",
  "minimapLocation": { "ymin": int, "xmin": int, "ymax": int, "xmax": int },
  "detectedIcons": [
    {
      "team": "string",
      "agentGuess": "string",
      "boundingBox": { "ymin": int, "xmin": int, "ymax": int, "xmax": int }
    }
  ],
  "summary": "string"
}"""


def build_bounds_instruction(manual_bounds: Optional[MinimapBounds]) -> str:
    """First instruction: either find the minimap or use the user's rectangle."""
    if manual_bounds is None:
        return (
            "1. **Locate the Minimap**: Find the minimap UI element (usually top-left). "
            "Return its ABSOLUTE bounding box (0-1000 scale) as minimapLocation."
        )
    return (
        "1. CRITICAL: The user has MANUALLY identified the minimap at these exact absolute "
        f"coordinates (0-1000 scale): YMIN:{manual_bounds.ymin}, XMIN:{manual_bounds.xmin}, "
        f"YMAX:{manual_bounds.ymax}, XMAX:{manual_bounds.xmax}. "
        "Use THESE coordinates as the reference for the minimap. "
        "Detect agents ONLY inside this box."
    )


def build_analysis_prompt(manual_bounds: Optional[MinimapBounds] = None) -> str:
    """
    Build the analysis prompt.

    Args:
        manual_bounds: Optional minimap rectangle drawn by the user

    Returns:
        Formatted prompt string
    """
    return f"""Analyze this Valorant gameplay screenshot with high precision.

GOAL: accurate extraction of player positions on the minimap.

INSTRUCTIONS:
{build_bounds_instruction(manual_bounds)}

2. **Detect ALL Agent Icons**: Find every agent/hero icon visible inside the minimap area.
   - Return the ABSOLUTE bounding box (0-1000 scale, relative to the full image) for each.
   - Identify the team (Red/Enemy/Attacker or Blue/Cyan/Ally/Defender).
   - Guess the agent name if the icon is clear.
3. **Map**: Identify the map name if visible (e.g. Haven, Bind, Ascent), or guess from its geometry.
4. **Summary**: Give a brief tactical summary of the positions (e.g. "Attackers are pushing B long").

OUTPUT: Return a SINGLE JSON object with this structure (do not wrap in markdown):
{RESPONSE_SHAPE}
"""
