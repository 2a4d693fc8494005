"""
End-to-end tests for the word report pipeline
"""

import pytest

from conftest import ARTICLE_PAGE, SIMPLE_PAGE
from sectionwords.cli import render
from sectionwords.config import ReportConfig
from sectionwords.error_handler import ErrorType
from sectionwords.fetcher import FetchResult
from sectionwords.pipeline import ReportBuilder, WordReport


class StubFetcher:
    """Returns a canned result without touching the network"""

    def __init__(self, content=None, error=None, error_type=None):
        self.content = content
        self.error = error
        self.error_type = error_type
        self.requested = []

    async def fetch(self, url):
        self.requested.append(url)
        return FetchResult(url=url, content=self.content, error=self.error,
                           error_type=self.error_type, status_code=200 if self.content else None)


@pytest.mark.asyncio
async def test_single_section_top_one():
    report = (ReportBuilder('https://example.test/wiki/Simple')
              .top(1)
              .with_fetcher(StubFetcher(SIMPLE_PAGE))
              .build())
    result = await report.run()

    assert result.ok
    assert result.section.blocks == ["Founded founded"]
    assert result.counts == {"founded": 2}
    assert result.rows == [("founded", 2)]
    assert render(result).splitlines()[-1] == "founded        \t2"


@pytest.mark.asyncio
async def test_article_against_local_server(page_server):
    report = ReportBuilder(str(page_server.make_url('/wiki/Article'))).top(3).build()
    result = await report.run()

    assert result.ok
    assert result.section.end_reached
    assert result.counts["the"] == 3
    assert "board" not in result.counts
    assert "editor" not in result.counts
    assert result.rows == [("the", 3), ("company", 2), ("deal", 2)]


@pytest.mark.asyncio
async def test_exclusions_applied(page_server):
    report = (ReportBuilder(str(page_server.make_url('/wiki/Article')))
              .top(3)
              .exclude(["The", " in "])
              .build())
    result = await report.run()

    assert result.rows == [("company", 2), ("deal", 2), ("growth", 2)]
    assert "the" not in result.counts


@pytest.mark.asyncio
async def test_top_n_truncation(page_server):
    report = ReportBuilder(str(page_server.make_url('/wiki/Article'))).top(5).build()
    result = await report.run()

    assert len(result.counts) > 5
    assert len(result.rows) == 5
    counts = [count for _, count in result.rows]
    assert counts == sorted(counts, reverse=True)


@pytest.mark.asyncio
async def test_missing_markers_give_header_only_table():
    report = (ReportBuilder('https://example.test/')
              .markers('Products', 'Corporate affairs')
              .with_fetcher(StubFetcher(SIMPLE_PAGE))
              .build())
    result = await report.run()

    assert result.ok
    assert result.section.blocks == []
    assert result.counts == {}
    assert result.rows == []
    assert render(result) == "Word\t\t# of Occurrences\n"


@pytest.mark.asyncio
async def test_fetch_failure_stops_the_run(page_server):
    report = ReportBuilder(str(page_server.make_url('/wiki/Broken'))).build()
    result = await report.run()

    assert not result.ok
    assert result.section is None
    assert result.rows == []
    output = render(result)
    assert "Exception Caught!" in output
    assert "http_server_error" in output


@pytest.mark.asyncio
async def test_failure_from_stub_fetcher():
    fetcher = StubFetcher(error='Cannot connect', error_type=ErrorType.CONNECTION_ERROR)
    report = WordReport(ReportConfig(url='https://example.test/'), fetcher=fetcher)
    result = await report.run()

    assert fetcher.requested == ['https://example.test/']
    assert render(result) == "\nException Caught!\nMessage :connection_error: Cannot connect "
    assert result.to_dict() == {
        'url': 'https://example.test/',
        'ok': False,
        'status_code': None,
        'response_time': 0.0,
        'error_type': 'connection_error',
        'error': 'Cannot connect',
    }


def test_analyze_to_dict():
    report = WordReport(ReportConfig(top_n=2), fetcher=StubFetcher())
    fetch = FetchResult(url='u', content=SIMPLE_PAGE, status_code=200)
    data = report.analyze('u', SIMPLE_PAGE, fetch).to_dict()

    assert data['ok']
    assert data['end_reached']
    assert data['blocks'] == 1
    assert data['distinct_words'] == 1
    assert data['top_words'] == [{'word': 'founded', 'count': 2}]


def test_builder_sets_config():
    builder = (ReportBuilder('https://example.test/')
               .markers('Start', 'Stop')
               .heading_tag('h3')
               .top(4)
               .exclude(['A', 'b '])
               .timeout(5)
               .user_agent('Agent/2'))
    config = builder.config

    assert (config.start_marker, config.end_marker, config.heading_tag) == ('Start', 'Stop', 'h3')
    assert config.top_n == 4
    assert config.excluded_words == {'a', 'b'}
    assert config.timeout == 5
    assert builder.build().fetcher.user_agent == 'Agent/2'


def test_config_defaults():
    config = ReportConfig()
    assert config.url == 'https://en.wikipedia.org/wiki/Microsoft'
    assert (config.start_marker, config.end_marker) == ('History', 'Corporate affairs')
    assert config.top_n == 10
    assert config.excluded_words == set()


@pytest.mark.asyncio
async def test_non_utf8_page_is_still_counted(page_server):
    report = ReportBuilder(str(page_server.make_url('/wiki/Latin1'))).top(1).build()
    result = await report.run()

    assert result.ok
    assert result.fetch.status_code == 200
    assert result.counts["founded"] == 2
    assert result.rows == [("founded", 2)]


def test_from_config_leaves_caller_config_alone():
    base = ReportConfig(url='https://example.test/', top_n=10)
    builder = ReportBuilder.from_config(base).top(1).exclude(['the']).markers('A', 'B')

    assert base.top_n == 10
    assert base.excluded_words == set()
    assert (base.start_marker, base.end_marker) == ('History', 'Corporate affairs')
    assert builder.config.top_n == 1
    assert builder.config.excluded_words == {'the'}


def test_config_single_excluded_word_string():
    assert ReportConfig(excluded_words=' The ').excluded_words == {'the'}
