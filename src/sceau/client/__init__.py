"""
Python client for the Sceau API.
"""

from sceau.client.api_client import SceauApiError, SceauClient

__all__ = ["SceauClient", "SceauApiError"]
