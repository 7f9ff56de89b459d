"""Test DetailEnricher degrade-to-defaults behavior"""

import asyncio

from entry_scraper.adapters.linkedin.details import DetailEnricher
from entry_scraper.adapters.linkedin.selectors import DETAIL_CONTAINER_SELECTOR
from entry_scraper.core.events import CollectingFailureSink, FailureKind
from entry_scraper.core.models import ListingDetail

from fakes import FakePage, FakeSessionFactory, navigation_timeout
from html_fixtures import DETAIL_HTML, DETAIL_HTML_NO_CRITERIA

JOB_URL = "https://www.linkedin.com/jobs/view/junior-data-analyst-at-acme-3801"


def _enrich(factory, sink, url=JOB_URL):
    enricher = DetailEnricher(session_factory=factory, sink=sink)
    return asyncio.run(enricher.enrich(url))


def test_enrich_extracts_detail():
    page = FakePage(DETAIL_HTML)
    factory = FakeSessionFactory(page)
    sink = CollectingFailureSink()

    detail = _enrich(factory, sink)

    assert detail.employment_type == "Full-time"
    assert detail.skills == ["SQL", "Python", "Tableau"]
    assert page.visited == [JOB_URL]
    assert page.waited_for == [DETAIL_CONTAINER_SELECTOR]
    assert factory.sessions[0].user_agents == [None]
    assert factory.all_closed
    assert sink.failures == []


def test_enrich_without_criteria_returns_defaults():
    detail = _enrich(FakeSessionFactory(FakePage(DETAIL_HTML_NO_CRITERIA)), CollectingFailureSink())

    assert detail.employment_type == "Other"
    assert detail.salary == ""
    assert detail.experience_level == "Entry Level"
    assert detail.skills == []


def test_navigation_timeout_returns_defaults():
    page = FakePage(DETAIL_HTML, goto_errors={0: navigation_timeout(JOB_URL)})
    factory = FakeSessionFactory(page)
    sink = CollectingFailureSink()

    detail = _enrich(factory, sink)

    assert detail == ListingDetail.defaults()
    assert sink.kinds() == [FailureKind.NAVIGATION]
    assert sink.failures[0].url == JOB_URL
    assert factory.sessions[0].closed


def test_selector_timeout_still_extracts():
    page = FakePage(DETAIL_HTML, selector_timeout=True)
    sink = CollectingFailureSink()

    detail = _enrich(FakeSessionFactory(page), sink)

    assert detail.salary == "$55,000 - $65,000"
    assert sink.kinds() == [FailureKind.SELECTOR_TIMEOUT]


def test_extraction_error_returns_defaults():
    page = FakePage(content_error=RuntimeError("Execution context was destroyed"))
    factory = FakeSessionFactory(page)
    sink = CollectingFailureSink()

    detail = _enrich(factory, sink)

    assert detail == ListingDetail.defaults()
    assert sink.kinds() == [FailureKind.EXTRACTION]
    assert factory.sessions[0].closed


def test_launch_failure_returns_defaults():
    sink = CollectingFailureSink()

    detail = _enrich(FakeSessionFactory(FakePage(), launch_error=True), sink)

    assert detail == ListingDetail.defaults()
    assert sink.kinds() == [FailureKind.RESOURCE_ACQUISITION]


def test_each_enrichment_uses_a_fresh_session():
    factory = FakeSessionFactory(FakePage(DETAIL_HTML))
    enricher = DetailEnricher(session_factory=factory, sink=CollectingFailureSink())

    async def enrich_twice():
        await enricher.enrich(JOB_URL)
        await enricher.enrich(JOB_URL + "-2")

    asyncio.run(enrich_twice())

    assert len(factory.sessions) == 2
    assert factory.all_closed
