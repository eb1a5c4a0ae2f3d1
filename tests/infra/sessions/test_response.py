import pytest

from novelupdates.infra.sessions.response import BaseResponse

# ---------------------------------------------------------
# BaseResponse tests
# ---------------------------------------------------------


def test_base_response_text_utf8():
    resp = BaseResponse(content="無職転生 (LN)".encode(), status=200)
    assert resp.text == "無職転生 (LN)"
    assert resp.ok


def test_base_response_declared_encoding_wins():
    resp = BaseResponse(content="café".encode("latin-1"), encoding="latin-1")
    assert resp.text == "café"


def test_base_response_unknown_encoding_falls_back_to_utf8():
    resp = BaseResponse(content="ok ✓".encode(), encoding="no-such-codec")
    assert resp.text == "ok ✓"


def test_base_response_invalid_bytes_are_replaced():
    resp = BaseResponse(content=b"ab\xff", encoding="utf-8")
    assert resp.text == "ab�"


@pytest.mark.parametrize(
    "status, ok",
    [(200, True), (204, True), (299, True), (301, False), (404, False), (503, False)],
)
def test_base_response_ok_is_2xx_only(status, ok):
    assert BaseResponse(content=b"", status=status).ok is ok


def test_base_response_repr():
    r = repr(BaseResponse(content=b"abcd", status=201, url="https://x/"))
    assert "status=201" in r
    assert "len=4" in r
    assert "https://x/" in r
