"""src/urikit/version.py

Version information for urikit.
"""

__version__ = "0.1.0"
