from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

ENV_API_URL = "POSTBOARD_API_URL"


@dataclass(frozen=True)
class ClientConfig:
    base_url: str = ""
    with_credentials: bool = True
    timeout_s: float | None = None
    token: str | None = None
    client_version: str | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **overrides) -> "ClientConfig":
        """Build a config with base_url taken from POSTBOARD_API_URL.

        The variable is read once, here; a missing variable leaves base_url empty.
        An explicit ``base_url`` override wins over the environment.
        """
        env = os.environ if environ is None else environ
        overrides.setdefault("base_url", env.get(ENV_API_URL, ""))
        return cls(**overrides)
