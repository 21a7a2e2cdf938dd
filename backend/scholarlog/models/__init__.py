"""ORM Models — SQLAlchemy declarative models for users and the six resource kinds.

Invariants:
    - All models inherit from Base (db/base.py)
    - Every resource model carries user_id via OwnedMixin

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
    - MODELS maps each ResourceKind to its table: the repository's only per-kind lookup
"""

from scholarlog.core.domain_types import ResourceKind
from scholarlog.models.user import User  # noqa: F401
from scholarlog.models.course import Course
from scholarlog.models.event import Event
from scholarlog.models.journal import Journal
from scholarlog.models.conference import Conference
from scholarlog.models.book import Book
from scholarlog.models.patent import Patent

MODELS = {
    ResourceKind.COURSE: Course,
    ResourceKind.EVENT: Event,
    ResourceKind.JOURNAL: Journal,
    ResourceKind.CONFERENCE: Conference,
    ResourceKind.BOOK: Book,
    ResourceKind.PATENT: Patent,
}
