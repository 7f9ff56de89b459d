from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

SOURCE_LINKEDIN = "LinkedIn"

DEFAULT_EMPLOYMENT_TYPE = "Other"
DEFAULT_SALARY = ""
DEFAULT_EXPERIENCE_LEVEL = "Entry Level"
DEFAULT_LOCATION = "Remote/Unspecified"


@dataclass(frozen=True)
class ListingSummary:
    """
    Minimal record read from a search-results page.
    The url is the natural key of the job across its lifetime.
    """

    title: str
    company: str
    location: str
    url: str
    source: str = SOURCE_LINKEDIN
    captured_at: Optional[datetime] = None


@dataclass
class ListingDetail:
    """
    Fields only available on a listing's own page.
    Every field carries a default; missing data never leaves a field absent.
    """

    description: str = ""
    employment_type: str = DEFAULT_EMPLOYMENT_TYPE
    salary: str = DEFAULT_SALARY
    experience_level: str = DEFAULT_EXPERIENCE_LEVEL
    skills: List[str] = field(default_factory=list)

    @classmethod
    def defaults(cls) -> "ListingDetail":
        return cls()


@dataclass(frozen=True)
class JobRecord:
    """
    Canonical persisted job: a listing summary merged with its detail.
    """

    title: str
    company: str
    location: str
    url: str
    source: str
    captured_at: datetime
    description: str = ""
    employment_type: str = DEFAULT_EMPLOYMENT_TYPE
    salary: str = DEFAULT_SALARY
    experience_level: str = DEFAULT_EXPERIENCE_LEVEL
    skills: Tuple[str, ...] = ()

    @classmethod
    def merge(cls, summary: ListingSummary, detail: ListingDetail) -> "JobRecord":
        return cls(
            title=summary.title,
            company=summary.company,
            location=summary.location,
            url=summary.url,
            source=summary.source,
            captured_at=summary.captured_at,
            description=detail.description,
            employment_type=detail.employment_type,
            salary=detail.salary,
            experience_level=detail.experience_level,
            skills=tuple(detail.skills),
        )

    def to_document(self) -> Dict[str, Any]:
        doc = asdict(self)
        doc["skills"] = list(self.skills)
        return doc

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "JobRecord":
        return cls(
            title=doc.get("title", ""),
            company=doc.get("company", ""),
            location=doc.get("location", DEFAULT_LOCATION),
            url=doc["url"],
            source=doc.get("source", SOURCE_LINKEDIN),
            captured_at=doc.get("captured_at"),
            description=doc.get("description", ""),
            employment_type=doc.get("employment_type", DEFAULT_EMPLOYMENT_TYPE),
            salary=doc.get("salary", DEFAULT_SALARY),
            experience_level=doc.get("experience_level", DEFAULT_EXPERIENCE_LEVEL),
            skills=tuple(doc.get("skills") or ()),
        )
