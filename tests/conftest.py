# ABOUTME: Shared pytest fixtures for article markup samples and fake collaborators
# ABOUTME: Markup mirrors the structures found on real Wikipedia article pages

import pytest

ALAN_TURING_URL = "https://en.wikipedia.org/wiki/Alan_Turing"

ALAN_TURING_HTML = """<!DOCTYPE html>
<html><head><title>Alan Turing - Wikipedia</title></head>
<body>
<div id="content" class="mw-body">
<h1 id="firstHeading" class="firstHeading mw-first-heading"><span class="mw-page-title-main">Alan Turing</span></h1>
<div id="mw-content-text" class="mw-body-content">
<p>Alan Mathison Turing was an English mathematician, computer scientist, logician and cryptanalyst.[1]</p>
<h2><span class="mw-headline" id="Early_life">Early life</span></h2>
<p>Turing was born in Maida Vale, while his father was on leave from his position in the Indian Civil Service.[2]</p>
<p>During the Second World War, Turing worked for the Government Code and Cypher School at
<a href="/wiki/Bletchley_Park" title="Bletchley Park">Bletchley Park</a>, the codebreaking centre.</p>
<p>Short caption.</p>
</div>
</div>
<div id="mw-navigation"><a href="/wiki/Main_Page" title="Main Page">Main page</a></div>
</body></html>
"""

MAIN_ONLY_HTML = """<html><body>
<header><a href="/wiki/Special:Search" title="Search">Search</a></header>
<main id="content">
<h2>History</h2>
<p>The city grew rapidly during the nineteenth century as railways connected it to the coast.</p>
<h3>Modern era</h3>
<p>Today the city is known for its universities, museums and a busy international airport.</p>
</main>
</body></html>
"""

NO_SECTIONS_HTML = """<html><body>
<h1 id="firstHeading">Plain Stub</h1>
<div id="bodyContent"><div id="mw-content-text">
<p>This stub article has a single paragraph that is long enough to be kept by the extractor.</p>
</div></div>
</body></html>
"""

BARE_DOCUMENT_HTML = """<h3>Legacy</h3>
<p>A document without any recognised content region still yields paragraphs and headings.</p>
"""


@pytest.fixture
def alan_turing_html() -> str:
    return ALAN_TURING_HTML


@pytest.fixture
def main_only_html() -> str:
    return MAIN_ONLY_HTML


@pytest.fixture
def no_sections_html() -> str:
    return NO_SECTIONS_HTML


@pytest.fixture
def bare_document_html() -> str:
    return BARE_DOCUMENT_HTML


class FakeFetcher:
    """Serves canned markup per URL and records every fetch."""

    def __init__(self, pages: dict[str, str] | None = None, error: Exception | None = None):
        self.pages = dict(pages or {})
        self.error = error
        self.calls: list[str] = []
        self.closed = False

    async def fetch(self, url: str) -> str:
        self.calls.append(url)
        if self.error is not None:
            raise self.error
        return self.pages[url]

    async def close(self) -> None:
        self.closed = True


class StepClock:
    """Deterministic clock that advances one second per reading."""

    def __init__(self, start: int = 1_700_000_000):
        self.current = start

    def __call__(self) -> float:
        value = self.current
        self.current += 1
        return float(value)


@pytest.fixture
def fake_fetcher() -> FakeFetcher:
    return FakeFetcher({ALAN_TURING_URL: ALAN_TURING_HTML})


@pytest.fixture
def step_clock() -> StepClock:
    return StepClock()


@pytest.fixture
def make_fetcher():
    """Factory for fake fetchers serving the given pages."""
    return FakeFetcher
