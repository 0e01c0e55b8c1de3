"""
Piksel - Python client for the Piksel video hosting API.

Wraps the Piksel OVP web services:
- Typed Video and Category objects instead of raw JSON
- Memoized data providers and a session scoped video cache
- Asset status checks and publication workflows
"""

__version__ = "0.2.0"

from piksel.client import Piksel, PikselClient

__all__ = ["Piksel", "PikselClient", "__version__"]
