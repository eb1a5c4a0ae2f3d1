from __future__ import annotations

import abc
import types
from collections.abc import Mapping, Sequence
from typing import Any, Self, TypedDict, Unpack

from novelupdates.infra.http_defaults import DEFAULT_USER_HEADERS
from novelupdates.schemas import SessionConfig

from .response import BaseResponse


class GetRequestKwargs(TypedDict, total=False):
    headers: Mapping[str, str] | Sequence[tuple[str, str]]
    cookies: dict[str, str] | list[tuple[str, str]]
    params: dict[str, Any] | list[tuple[str, Any]] | None


class BaseSession(abc.ABC):
    """Synchronous HTTP session shared by the fetcher.

    Backends wrap their own transport exceptions into
    :class:`~novelupdates.errors.TransportError` so that callers only deal
    with one error type regardless of the HTTP library in use.
    """

    def __init__(self, cfg: SessionConfig | None = None, **kwargs: Any) -> None:
        """Initializes the session using the provided configuration.

        Args:
            cfg: Optional configuration object defining session behavior.
            **kwargs: Additional parameters reserved for backend-specific
                initialization.
        """
        cfg = cfg or SessionConfig()

        self._timeout = cfg.timeout
        self._max_connections = cfg.max_connections
        self._verify_ssl = cfg.verify_ssl
        self._impersonate = cfg.impersonate
        self._http2 = cfg.http2
        self._proxy = cfg.proxy
        self._proxy_user = cfg.proxy_user
        self._proxy_pass = cfg.proxy_pass
        self._trust_env = cfg.trust_env
        self._cookies = cfg.cookies or {}
        self._session: Any = None

        self._headers = (
            cfg.headers.copy()
            if cfg.headers is not None
            else DEFAULT_USER_HEADERS.copy()
        )
        if cfg.user_agent:
            self._headers["User-Agent"] = cfg.user_agent

    @abc.abstractmethod
    def init(self, **kwargs: Any) -> None:
        """Initializes backend-specific resources.

        Args:
            **kwargs: Additional parameters required by backend implementations.
        """
        ...

    @abc.abstractmethod
    def close(self) -> None:
        """Releases and cleans up any allocated resources."""
        ...

    @abc.abstractmethod
    def get(
        self,
        url: str,
        *,
        allow_redirects: bool | None = None,
        verify: bool | None = None,
        encoding: str = "utf-8",
        **kwargs: Unpack[GetRequestKwargs],
    ) -> BaseResponse:
        """Performs an HTTP GET request.

        Redirects are followed unless ``allow_redirects`` is False.

        Args:
            url: Target URL.
            allow_redirects: Whether redirects should be followed.
            verify: Whether SSL verification should be performed.
            encoding: Fallback response text encoding.
            **kwargs: Additional request parameters forwarded to the backend.

        Returns:
            BaseResponse: A response wrapper for the GET request.

        Raises:
            RuntimeError: If the session has not been initialized.
            TransportError: If the request could not be completed.
        """
        ...

    @property
    def headers(self) -> dict[str, str]:
        """Returns a copy of the current session headers.

        Returns:
            dict[str, str]: Header names mapped to their values.
        """
        return self._headers.copy()

    def __enter__(self) -> Self:
        self.init()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        tb: types.TracebackType | None,
    ) -> None:
        self.close()
