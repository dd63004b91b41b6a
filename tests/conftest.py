import types

import pytest


class FakeSession:
    """Stands in for ``requests.Session``; records requested URLs."""

    def __init__(self, *, body=b"", status_code=200, error=None):
        self.body = body
        self.status_code = status_code
        self.error = error
        self.calls = []

    def get(self, url, timeout=None):
        self.calls.append((url, timeout))
        if self.error is not None:
            raise self.error
        body = self.body if isinstance(self.body, bytes) else self.body.encode("utf-8")
        return types.SimpleNamespace(
            status_code=self.status_code,
            content=body,
            text=body.decode("utf-8"),
        )


@pytest.fixture
def fake_session():
    return FakeSession


NEWS_FEED = """\
<?xml version="1.0" encoding="utf-8"?>
<rss version="2.0">
  <channel>
    <title>Arch Linux: Recent news updates</title>
    <link>https://archlinux.org/news/</link>
    <description>The latest and greatest news from the Arch Linux distribution.</description>
    <item>
      <title>Manual intervention for pacman</title>
      <link>https://archlinux.org/news/manual-intervention/</link>
      <description>&lt;p&gt;Run &lt;code&gt;pacman -Syu&lt;/code&gt; now.&lt;/p&gt;&lt;p&gt;See &lt;a href="https://wiki.archlinux.org/"&gt;the wiki&lt;/a&gt;.&lt;/p&gt;</description>
      <pubDate>Mon, 01 Jan 2024 12:00:00 +0000</pubDate>
    </item>
    <item>
      <title>Second item</title>
      <link>https://archlinux.org/news/second/</link>
      <description>&lt;p&gt;Plain words.&lt;/p&gt;</description>
    </item>
  </channel>
</rss>
"""


@pytest.fixture
def news_feed():
    return NEWS_FEED
