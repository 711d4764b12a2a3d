"""
Sceau - wallet-signature sessions for the Tutorial Platform.
"""

__version__ = "0.1.0"
