import httpx
import pytest

from adserver_acceptance.client import CreativeFetcher, extract_banner_id
from adserver_acceptance.errors import AdServerError

VAST_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<VAST version="3.0">
  <Ad id="1">
    <InLine>
      <Creatives>
        <Creative>
          <Linear>
            <VideoClicks>
              <ClickThrough>{click}</ClickThrough>
            </VideoClicks>
          </Linear>
        </Creative>
      </Creatives>
    </InLine>
  </Ad>
</VAST>
"""


def test_extract_plain_text() -> None:
    document = VAST_TEMPLATE.format(click="\n  https://integros.com/test/b2  \n")
    assert extract_banner_id(document) == "https://integros.com/test/b2"


def test_extract_cdata() -> None:
    document = VAST_TEMPLATE.format(click="<![CDATA[https://integros.com/test/b3]]>")
    assert extract_banner_id(document) == "https://integros.com/test/b3"


def test_extract_missing_element() -> None:
    assert extract_banner_id("<VAST version=\"3.0\"></VAST>") == ""


def test_fetch_sends_headers() -> None:
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["ua"] = request.headers.get("User-Agent")
        return httpx.Response(200, text=VAST_TEMPLATE.format(click="https://integros.com/test/b1"))

    with CreativeFetcher({"User-Agent": "probe/1.0"}, transport=httpx.MockTransport(handler)) as fetcher:
        assert fetcher.fetch_banner_id("https://ads.example.test/vast") == "https://integros.com/test/b1"
    assert seen["ua"] == "probe/1.0"


def test_fetch_http_error() -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(502))
    with CreativeFetcher(transport=transport) as fetcher:
        with pytest.raises(AdServerError):
            fetcher.fetch("https://ads.example.test/vast")
