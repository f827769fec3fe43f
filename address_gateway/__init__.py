"""
Address Gateway - HTTP front for the road-name address search API.

This package validates address-search keywords, calls the upstream
address API with a server-held key and reshapes its reply into a
uniform JSON envelope for browser clients.
"""

__version__ = "0.1.0"
