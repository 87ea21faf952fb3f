"""
Python client for the Starter API.

Exports the HTTP layer (HttpClient, HttpError, NetworkError) and the
typed resource APIs bundled by ApiClient.
"""

from app.client.api import ApiClient, HealthApi, HelloApi, UsersApi
from app.client.http_client import HttpClient, HttpError, NetworkError

__all__ = [
    "ApiClient",
    "HealthApi",
    "HelloApi",
    "HttpClient",
    "HttpError",
    "NetworkError",
    "UsersApi",
]
