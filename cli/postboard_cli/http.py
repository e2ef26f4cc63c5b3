from __future__ import annotations

from postboard_client import PostboardClient
from postboard_client.config_types import ClientConfig

from . import __version__
from .config import AppConfig, normalize_base_url, resolve_base_url


def make_client(
    cfg: AppConfig,
    *,
    base_url_override: str | None,
    timeout_s: float | None = None,
) -> PostboardClient:
    base_url = normalize_base_url(base_url_override or resolve_base_url(cfg), warn=True)
    return PostboardClient(
        ClientConfig(
            base_url=base_url,
            token=cfg.auth.token or None,
            timeout_s=timeout_s,
            client_version=__version__,
        )
    )
