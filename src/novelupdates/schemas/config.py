"""
Defines structured configuration models using dataclasses.
"""

from dataclasses import dataclass, field
from typing import Literal

from novelupdates.infra.http_defaults import DEFAULT_IMPERSONATE

GroupSlugMode = Literal["compat", "hyphenated"]


@dataclass
class SessionConfig:
    """Configuration for HTTP session behavior.

    Attributes:
        timeout: Request timeout in seconds.
        max_connections: Maximum number of concurrent connections.
        user_agent: Custom User-Agent string.
        headers: Headers replacing the default browser profile.
        cookies: Default cookies for the session.
        impersonate: Browser impersonation target. (`curl_cffi`)
        verify_ssl: Whether to verify SSL certificates.
        http2: Whether HTTP/2 should be used. (`httpx`)
        trust_env: Whether environment variables are used for proxies.
        proxy: Proxy server URL.
        proxy_user: Proxy authentication username.
        proxy_pass: Proxy authentication password.
    """

    timeout: float = 10.0
    max_connections: int = 10
    user_agent: str | None = None
    headers: dict[str, str] | None = None
    cookies: dict[str, str] | None = None
    impersonate: str | None = DEFAULT_IMPERSONATE
    verify_ssl: bool = True
    http2: bool = True
    trust_env: bool = False
    proxy: str | None = None
    proxy_user: str | None = None
    proxy_pass: str | None = None


@dataclass
class FetcherConfig:
    """Configuration for fetching pages from NovelUpdates.

    Attributes:
        backend: HTTP backend name (curl_cffi, httpx).
        encode_query: Percent-encode search keywords. When False the keyword
            is appended to the URL as-is.
        session_cfg: HTTP session configuration.
    """

    backend: str = "curl_cffi"
    encode_query: bool = True
    session_cfg: SessionConfig = field(default_factory=SessionConfig)


@dataclass
class ParserConfig:
    """Configuration for extracting records from HTML.

    Attributes:
        compat_label_trim: Clean the status / licensed / translated fields by
            dropping one leading space and then one more character, as the
            site layout expects. When False the values are whitespace-trimmed.
        group_slug: How translator group URLs are derived from group names.
            ``"compat"`` drops word separators entirely, ``"hyphenated"``
            joins words with hyphens. In both modes a group entry without a
            name is skipped with a warning, so no link to the bare
            ``/group/`` page is produced.
    """

    compat_label_trim: bool = True
    group_slug: GroupSlugMode = "compat"


@dataclass
class ClientConfig:
    """Top-level configuration for the NovelUpdates client.

    Attributes:
        fetcher_cfg: Configuration for the fetcher.
        parser_cfg: Configuration for the parsers.
    """

    fetcher_cfg: FetcherConfig = field(default_factory=FetcherConfig)
    parser_cfg: ParserConfig = field(default_factory=ParserConfig)
