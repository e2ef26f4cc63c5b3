__version__ = "0.1.0"

from .client import PostboardClient
from .config_types import ClientConfig
from .errors import ApiError, AuthError, InvalidRequestError, NetworkError, PostboardClientError
from .fetcher import AsyncFetcher, Fetcher, create_async_fetcher, create_fetcher

__all__ = [
    "PostboardClient",
    "ClientConfig",
    "Fetcher",
    "AsyncFetcher",
    "create_fetcher",
    "create_async_fetcher",
    "ApiError",
    "AuthError",
    "NetworkError",
    "InvalidRequestError",
    "PostboardClientError",
]
