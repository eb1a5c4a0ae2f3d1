"""
Provides the default HTTP headers used by the networking layer.

NovelUpdates rejects clients that do not look like a mainstream browser, so
the default header set mirrors what a current desktop Chrome sends for a
top-level navigation, client hints included. The User-Agent, the
``Sec-CH-UA`` brand list and the curl_cffi impersonation target all follow
``CHROME_MAJOR_VERSION``.
"""

# -----------------------------------------------------------------------------
# Default preferences & headers
# -----------------------------------------------------------------------------

CHROME_MAJOR_VERSION = "136"

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    f"Chrome/{CHROME_MAJOR_VERSION}.0.0.0 Safari/537.36"
)
# curl_cffi target whose TLS fingerprint matches the User-Agent above
DEFAULT_IMPERSONATE = f"chrome{CHROME_MAJOR_VERSION}"

DEFAULT_ACCEPT = (
    "text/html,application/xhtml+xml,application/xml;q=0.9,image/avif,"
    "image/webp,image/apng,*/*;q=0.8,application/signed-exchange;v=b3;q=0.7"
)

DEFAULT_SEC_CH_UA = (
    f'"Chromium";v="{CHROME_MAJOR_VERSION}", '
    f'"Google Chrome";v="{CHROME_MAJOR_VERSION}", '
    '"Not.A/Brand";v="99"'
)

DEFAULT_USER_HEADERS = {
    "Accept": DEFAULT_ACCEPT,
    "Accept-Encoding": "gzip, deflate, br",
    "Accept-Language": "en-US,en;q=0.9",
    "User-Agent": DEFAULT_USER_AGENT,
    "Sec-CH-UA": DEFAULT_SEC_CH_UA,
    "Sec-CH-UA-Mobile": "?0",
    "Sec-CH-UA-Platform": '"Windows"',
    "Sec-Fetch-Dest": "document",
    "Sec-Fetch-Mode": "navigate",
    "Sec-Fetch-Site": "none",
    "Sec-Fetch-User": "?1",
    "Upgrade-Insecure-Requests": "1",
    "Connection": "keep-alive",
}
