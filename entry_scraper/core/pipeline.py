import logging
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import List, Optional

from entry_scraper.adapters.base import JobPortalAdapter
from entry_scraper.adapters.linkedin.adapter import LinkedInAdapter
from entry_scraper.config.settings import settings
from entry_scraper.core.events import (
    Failure,
    FailureKind,
    FailureSink,
    LoggingFailureSink,
    StoreUnavailableError,
    StoreWriteError,
)
from entry_scraper.core.models import JobRecord, ListingSummary
from entry_scraper.core.store import JobStore, MongoJobStore

logger = logging.getLogger(__name__)

STAGE = "pipeline"

FAILURE_MESSAGES = {
    FailureKind.STORE_LOOKUP: "Error looking up job",
    FailureKind.EXTRACTION: "Error enriching job",
    FailureKind.STORE_WRITE: "Error saving job",
}


@dataclass
class PipelineOptions:
    location: str = ""
    page_count: int = settings.DEFAULT_PAGE_COUNT

    def __post_init__(self):
        if self.page_count < 1:
            raise ValueError(f"page_count must be positive, got {self.page_count}")


@dataclass
class RunResult:
    """
    Outcome of one pipeline run. Created fresh per run.
    """

    records: List[JobRecord] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)

    @property
    def saved_count(self) -> int:
        return len(self.records)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)

    @property
    def failed_count(self) -> int:
        return len(self.failed)


def normalize_captured_at(summary: ListingSummary) -> ListingSummary:
    """Replace a missing or invalid capture time with the current time."""
    if isinstance(summary.captured_at, datetime):
        return summary
    return replace(summary, captured_at=datetime.now(timezone.utc))


class Pipeline:
    """
    Scrape, deduplicate against the store, enrich, and persist new listings.
    Listings are processed one at a time, in extraction order; a failure on one
    listing never stops the ones after it.
    """

    def __init__(
        self,
        adapter: JobPortalAdapter,
        store: JobStore,
        sink: Optional[FailureSink] = None,
    ):
        self.adapter = adapter
        self.store = store
        self.sink = sink or LoggingFailureSink()

    async def run(self, options: Optional[PipelineOptions] = None) -> RunResult:
        options = options or PipelineOptions()
        result = RunResult()

        logger.info(
            f"Starting {self.adapter.source} scrape "
            f"(Location: {options.location or 'any'}, Pages: {options.page_count})"
        )
        summaries = await self.adapter.scrape_listings(
            options.location, options.page_count
        )
        logger.info(f"Discovered {len(summaries)} listings.")

        for summary in summaries:
            await self._process(summary, result)

        logger.info(
            f"{self.adapter.source} scraper completed. Saved {result.saved_count} new jobs "
            f"({result.skipped_count} already stored, {result.failed_count} failed)."
        )
        return result

    async def _process(self, summary: ListingSummary, result: RunResult) -> None:
        url = summary.url
        try:
            existing = self.store.find_by_url(url)
        except Exception as e:
            self._fail(FailureKind.STORE_LOOKUP, summary, e, result)
            return

        if existing is not None:
            logger.debug(f"Skipping already stored job: {url}")
            result.skipped.append(url)
            return

        try:
            summary = normalize_captured_at(summary)

            logger.info(f"Fetching details for job: {summary.title} at {summary.company}")
            detail = await self.adapter.enrich(url)
            record = JobRecord.merge(summary, detail)
        except Exception as e:
            self._fail(FailureKind.EXTRACTION, summary, e, result)
            return

        try:
            self.store.create(record)
        except Exception as e:
            self._fail(FailureKind.STORE_WRITE, summary, e, result)
            return

        logger.info(f"Saved job with description: {record.title}")
        result.records.append(record)

    def _fail(
        self,
        kind: FailureKind,
        summary: ListingSummary,
        error: Exception,
        result: RunResult,
    ) -> None:
        self.sink.report(
            Failure(
                kind,
                STAGE,
                f"{FAILURE_MESSAGES.get(kind, 'Error processing job')} "
                f"({summary.title}): {error}",
                url=summary.url,
                error=error,
            )
        )
        result.failed.append(summary.url)


async def run_pipeline(
    options: Optional[PipelineOptions] = None,
    store: Optional[JobStore] = None,
    sink: Optional[FailureSink] = None,
    adapter: Optional[JobPortalAdapter] = None,
) -> RunResult:
    """
    Caller-facing entry point: run the LinkedIn pipeline once.
    Builds a MongoDB-backed store from settings when none is given.
    """
    sink = sink or LoggingFailureSink()
    if store is None:
        try:
            mongo_store = MongoJobStore.from_settings()
        except StoreUnavailableError as e:
            sink.report(
                Failure(FailureKind.RESOURCE_ACQUISITION, STAGE, str(e), error=e)
            )
            return RunResult()
        try:
            mongo_store.ensure_indexes()
        except StoreWriteError as e:
            sink.report(Failure(FailureKind.STORE_WRITE, STAGE, str(e), error=e))
        store = mongo_store
    adapter = adapter or LinkedInAdapter(sink=sink)
    return await Pipeline(adapter, store, sink=sink).run(options)
