"""
Exceptions raised while analyzing a screenshot.
"""


class AnalysisError(Exception):
    """Base class for anything that prevents an analysis from producing a result."""


class ProviderNotConfiguredError(AnalysisError):
    """The requested provider has no API client (missing key)."""


class ProviderError(AnalysisError):
    """The provider call could not be completed."""


class ResponseParseError(AnalysisError, ValueError):
    """The provider reply was empty, not JSON, or missing required fields."""


class DegenerateBoundsError(AnalysisError, ValueError):
    """The resolved minimap rectangle has zero (or negative) width or height."""


class UnknownProviderError(ValueError):
    """No provider is registered under the requested tag."""
