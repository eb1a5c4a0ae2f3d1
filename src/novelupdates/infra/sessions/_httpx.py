from typing import Any, Unpack

import httpx

from novelupdates.errors import TransportError
from novelupdates.schemas import SessionConfig

from .base import BaseSession, GetRequestKwargs
from .response import BaseResponse


class HttpxSession(BaseSession):
    """Session backend based on httpx providing HTTP/1.1 and HTTP/2 support.

    httpx cannot reproduce a browser TLS fingerprint; it only sends the
    browser header profile. ``transport`` may be passed to plug in a custom
    (e.g. mock) transport.
    """

    _session: httpx.Client | None

    def __init__(
        self,
        cfg: SessionConfig | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(cfg, **kwargs)
        self._transport = transport

    def init(self, **kwargs: Any) -> None:
        if self._session and not self._session.is_closed:
            return
        limits = httpx.Limits(
            max_keepalive_connections=self._max_connections,
            max_connections=self._max_connections,
        )
        proxy = self._build_proxy_config(
            self._proxy,
            self._proxy_user,
            self._proxy_pass,
        )

        self._session = httpx.Client(
            http2=self._http2,
            timeout=self._timeout,
            verify=self._verify_ssl,
            headers=self._headers,
            cookies=self._cookies,
            limits=limits,
            proxy=proxy,
            trust_env=self._trust_env,
            follow_redirects=True,
            transport=self._transport,
        )

    def close(self) -> None:
        """
        Shutdown and clean up any resources.
        """
        if self._session is None:
            return
        if not self._session.is_closed:
            self._session.close()
        self._session = None

    def get(
        self,
        url: str,
        *,
        allow_redirects: bool | None = None,
        verify: bool | None = None,
        encoding: str = "utf-8",
        **kwargs: Unpack[GetRequestKwargs],
    ) -> BaseResponse:
        if allow_redirects is not None:
            kwargs.setdefault("follow_redirects", allow_redirects)  # type: ignore[typeddict-item]

        try:
            r = self.session.get(url, **kwargs)
        except httpx.HTTPError as exc:
            raise TransportError(f"Request to {url} failed: {exc}", url=url) from exc

        return BaseResponse(
            content=r.content,
            status=r.status_code,
            encoding=r.encoding or encoding,
            url=str(r.url),
        )

    @property
    def session(self) -> httpx.Client:
        if self._session is None:
            raise RuntimeError("Session is not initialized or has been shut down.")
        return self._session

    @staticmethod
    def _build_proxy_config(
        proxy: str | None = None,
        proxy_user: str | None = None,
        proxy_pass: str | None = None,
    ) -> str | httpx.Proxy | None:
        """Builds proxy configuration."""
        if not proxy:
            return None

        if "@" in proxy:
            return proxy

        if proxy_user and proxy_pass:
            return httpx.Proxy(proxy, auth=(proxy_user, proxy_pass))

        return proxy
