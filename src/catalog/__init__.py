"""Library catalog service.

This package contains the book catalog backend: configuration runtime,
persistence layer, catalog business rules and the HTTP API.
"""

__version__ = "0.1.0"
