# mypy: disable-error-code=unused-ignore

from __future__ import annotations

from typing import Any, Unpack

from curl_cffi.requests import Session
from curl_cffi.requests.exceptions import RequestException

from novelupdates.errors import TransportError

from .base import BaseSession, GetRequestKwargs
from .response import BaseResponse


class CurlCffiSession(BaseSession):
    """Session backend using curl_cffi for browser-like HTTP requests.

    Besides sending the browser header profile, curl_cffi reproduces the TLS
    and HTTP/2 fingerprint of the browser named by ``impersonate``.
    """

    _session: Session[Any] | None

    def init(self, **kwargs: Any) -> None:
        if self._session:
            return

        proxy_auth = None
        if self._proxy_user and self._proxy_pass:
            proxy_auth = (self._proxy_user, self._proxy_pass)

        self._session = Session(
            headers=self._headers,
            cookies=self._cookies,
            timeout=self._timeout,
            impersonate=self._impersonate,  # type: ignore[arg-type]
            verify=self._verify_ssl,
            proxy=self._proxy,
            proxy_auth=proxy_auth,
            trust_env=self._trust_env,
            allow_redirects=True,
        )

    def close(self) -> None:
        """
        Shutdown and clean up any resources.
        """
        if self._session is not None:
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
        if verify is not None:
            kwargs.setdefault("verify", verify)  # type: ignore[typeddict-item]
        if allow_redirects is not None:
            kwargs.setdefault("allow_redirects", allow_redirects)  # type: ignore[typeddict-item]

        try:
            r = self.session.get(url, **kwargs)
        except RequestException as exc:
            raise TransportError(f"Request to {url} failed: {exc}", url=url) from exc

        return BaseResponse(
            content=r.content,
            status=r.status_code,
            encoding=r.encoding or encoding,
            url=str(r.url),
        )

    @property
    def session(self) -> Session[Any]:
        if self._session is None:
            raise RuntimeError("Session is not initialized or has been shut down.")
        return self._session
