"""
Failure taxonomy and reporting sinks.

Components never let failures escape a call boundary. Instead each failure is
described as a `Failure` value and handed to a `FailureSink` supplied by the
caller, so failure conditions can be asserted on rather than only read in logs.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Protocol

logger = logging.getLogger(__name__)


class ScraperError(Exception):
    """Base class for errors raised inside the scraper core."""


class ResourceAcquisitionError(ScraperError):
    """The browser session could not be launched."""


class StoreUnavailableError(ScraperError):
    """The store client could not be created from its configuration."""


class StoreLookupError(ScraperError):
    """The store could not be queried for an existing record."""


class StoreWriteError(ScraperError):
    """The store rejected or failed to persist a record."""


class FailureKind(str, Enum):
    RESOURCE_ACQUISITION = "resource_acquisition"
    NAVIGATION = "navigation"
    SELECTOR_TIMEOUT = "selector_timeout"
    EXTRACTION = "extraction"
    STORE_LOOKUP = "store_lookup"
    STORE_WRITE = "store_write"


# Kinds that leave the call able to produce a (possibly partial) result
TOLERATED_KINDS = frozenset({FailureKind.SELECTOR_TIMEOUT})


@dataclass(frozen=True)
class Failure:
    kind: FailureKind
    stage: str
    message: str
    url: Optional[str] = None
    error: Optional[BaseException] = None

    @property
    def tolerated(self) -> bool:
        return self.kind in TOLERATED_KINDS


class FailureSink(Protocol):
    def report(self, failure: Failure) -> None: ...


class LoggingFailureSink:
    """
    Default sink: writes each failure to the log and nothing else.
    """

    def report(self, failure: Failure) -> None:
        level = logging.WARNING if failure.tolerated else logging.ERROR
        target = f" ({failure.url})" if failure.url else ""
        logger.log(
            level,
            f"[{failure.stage}] {failure.kind.value}{target}: {failure.message}",
        )


class CollectingFailureSink(LoggingFailureSink):
    """
    Keeps every reported failure in memory, in report order, after logging it.
    """

    def __init__(self):
        self.failures: List[Failure] = []

    def report(self, failure: Failure) -> None:
        super().report(failure)
        self.failures.append(failure)

    def kinds(self) -> List[FailureKind]:
        return [f.kind for f in self.failures]
