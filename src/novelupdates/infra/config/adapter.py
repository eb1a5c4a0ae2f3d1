from __future__ import annotations

from pathlib import Path
from typing import Any

from novelupdates.infra.config.file_io import load_config
from novelupdates.infra.http_defaults import DEFAULT_IMPERSONATE
from novelupdates.schemas import (
    ClientConfig,
    FetcherConfig,
    ParserConfig,
    SessionConfig,
)

SITE_KEY = "novelupdates"


class ConfigAdapter:
    """High-level accessor for general and site-specific configuration.

    All configuration resolution follows the order:

    **general -> site-specific -> built-in defaults**

    Args:
        config (dict[str, Any]): Fully loaded configuration mapping containing
            a ``general`` block and optionally a ``sites`` block.
        site (str): Key of the site block to merge over ``general``.
    """

    def __init__(self, config: dict[str, Any], site: str = SITE_KEY) -> None:
        self._config: dict[str, Any] = dict(config)
        self._site = site

    def get_config(self) -> dict[str, Any]:
        """Return the full raw configuration mapping."""
        return self._config

    def get_session_config(self) -> SessionConfig:
        """Build a SessionConfig by merging general and site overrides.

        Returns:
            SessionConfig: Resolved session configuration.
        """
        cfg = {**self._gen_cfg(), **self._site_cfg()}
        cookies = cfg.get("cookies")

        return SessionConfig(
            timeout=float(cfg.get("timeout", 10.0)),
            max_connections=int(cfg.get("max_connections", 10)),
            user_agent=cfg.get("user_agent"),
            headers=cfg.get("headers"),
            cookies=cookies if isinstance(cookies, dict) else None,
            impersonate=cfg.get("impersonate", DEFAULT_IMPERSONATE),
            verify_ssl=bool(cfg.get("verify_ssl", True)),
            http2=bool(cfg.get("http2", True)),
            trust_env=bool(cfg.get("trust_env", False)),
            proxy=cfg.get("proxy"),
            proxy_user=cfg.get("proxy_user"),
            proxy_pass=cfg.get("proxy_pass"),
        )

    def get_fetcher_config(self) -> FetcherConfig:
        """Build a FetcherConfig by merging general and site overrides.

        Returns:
            FetcherConfig: Resolved fetcher configuration.
        """
        cfg = {**self._gen_cfg(), **self._site_cfg()}
        backend = cfg.get("backend")

        return FetcherConfig(
            backend=backend if isinstance(backend, str) else "curl_cffi",
            encode_query=bool(cfg.get("encode_query", True)),
            session_cfg=self.get_session_config(),
        )

    def get_parser_config(self) -> ParserConfig:
        """Build a ParserConfig by merging general and site overrides.

        Returns:
            ParserConfig: Resolved parser configuration.

        Raises:
            ValueError: If ``group_slug`` names an unknown mode.
        """
        general_parser = self._gen_cfg().get("parser") or {}
        site_parser = self._site_cfg().get("parser") or {}
        parser_cfg: dict[str, Any] = {**general_parser, **site_parser}

        group_slug = parser_cfg.get("group_slug", "compat")
        if group_slug not in ("compat", "hyphenated"):
            raise ValueError(f"Unsupported group_slug mode: {group_slug!r}")

        return ParserConfig(
            compat_label_trim=bool(parser_cfg.get("compat_label_trim", True)),
            group_slug=group_slug,
        )

    def get_client_config(self) -> ClientConfig:
        """Build a ClientConfig from the fetcher and parser sections.

        Returns:
            ClientConfig: Resolved client configuration.
        """
        return ClientConfig(
            fetcher_cfg=self.get_fetcher_config(),
            parser_cfg=self.get_parser_config(),
        )

    def _gen_cfg(self) -> dict[str, Any]:
        """Return general configuration mapping.

        Returns:
            dict[str, Any]: ``general`` config or empty dict.
        """
        general = self._config.get("general")
        return general if isinstance(general, dict) else {}

    def _site_cfg(self) -> dict[str, Any]:
        """Return configuration block for the configured site.

        Returns:
            dict[str, Any]: Site configuration or empty dict.
        """
        sites_cfg = self._config.get("sites") or {}
        value = sites_cfg.get(self._site)
        return value if isinstance(value, dict) else {}


def load_client_config(
    config_path: str | Path | None = None, site: str = SITE_KEY
) -> ClientConfig:
    """Load the settings file and turn it into a :class:`ClientConfig`.

    Raises:
        FileNotFoundError: No settings file was found.
        ValueError: The file is malformed or holds an invalid parser option.
    """
    return ConfigAdapter(load_config(config_path), site=site).get_client_config()
