"""Resource Kinds — one declarative descriptor per tracked record type.

Invariants:
    - Exactly one descriptor per ResourceKind, all sharing the same owner field
    - Field order is the order violation messages are reported in
    - owner field is never part of a kind's schema: it comes from the Principal
    - Every bounded text column has a matching length check: an over-long value is
      a 400, never a store error

Design Decisions:
    - Descriptors are data, not subclasses: the repository engine is the only behaviour
    - Messages kept verbatim from the forms the client already renders
"""

from dataclasses import dataclass

from scholarlog.core.domain_types import FieldType, ResourceKind, TEXT_COLUMN_LENGTH
from scholarlog.core.field_rules import (
    Check, FieldRule, is_date, is_datetime, is_not_empty, max_length,
)

OWNER_ATTR = "user_id"
OWNER_FIELD = "userId"


@dataclass(frozen=True)
class ResourceDescriptor:
    """Everything the generic engine needs to know about one kind."""
    kind: ResourceKind
    label: str
    fields: tuple[FieldRule, ...]
    owner_attr: str = OWNER_ATTR
    owner_field: str = OWNER_FIELD

    @property
    def plural(self) -> str:
        return self.kind.plural

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(rule.name for rule in self.fields)


def _text(
    name: str, attr: str, missing: str | None = None, empty: str | None = None,
    unique: str | None = None, limit: int | None = TEXT_COLUMN_LENGTH,
) -> FieldRule:
    """Text field; required when a missing message is given.

    limit mirrors the column width; None for unbounded TEXT columns.
    """
    checks = (Check(is_not_empty, empty),) if empty else ()
    if limit is not None:
        checks += (Check(max_length(limit), f"{name} must be {limit} characters or less."),)
    return FieldRule(
        name=name, attr=attr, required=missing is not None,
        missing_message=missing, checks=checks, unique_message=unique,
    )


def _date(name: str, attr: str, missing: str, invalid: str, date_only: bool) -> FieldRule:
    return FieldRule(
        name=name, attr=attr, required=True, missing_message=missing,
        checks=(Check(is_date if date_only else is_datetime, invalid),),
        field_type=FieldType.DATE if date_only else FieldType.DATETIME,
    )


COURSE = ResourceDescriptor(
    kind=ResourceKind.COURSE,
    label="Course",
    fields=(
        _text("title", "title", "A title is required", "Please provide a title"),
        _text(
            "description", "description",
            "A description is required", "Please provide a description",
            limit=None,
        ),
        _text("estimatedTime", "estimated_time"),
        _text("materialsNeeded", "materials_needed", limit=None),
    ),
)

EVENT = ResourceDescriptor(
    kind=ResourceKind.EVENT,
    label="Event",
    fields=(
        _text(
            "title", "title",
            "An event title is required.", "Please provide a title for the event.",
        ),
        _text(
            "description", "description",
            "An event description is required.",
            "Please provide a description for the event.",
            limit=None,
        ),
        _text(
            "eventType", "event_type",
            "Event type is required.", "Please select an event type.",
        ),
        _text(
            "participationType", "participation_type",
            "Participation type is required.",
            "Please specify your participation type.",
        ),
        _date(
            "eventDate", "event_date",
            "An event date is required.", "Please provide a valid date.",
            date_only=True,
        ),
        _text(
            "location", "location",
            "A location for the event is required.",
            "Please provide a location for the event.",
        ),
    ),
)

JOURNAL = ResourceDescriptor(
    kind=ResourceKind.JOURNAL,
    label="Journal",
    fields=(
        _text(
            "title", "title",
            "A journal title is required.", "Please provide a title for the journal.",
        ),
        _text(
            "authors", "authors",
            "Authors are required.", "Please provide the authors for the journal.",
        ),
        _date(
            "publicationDate", "publication_date",
            "A publication date is required.",
            "Please provide a valid date for the publication.",
            date_only=False,
        ),
        _text(
            "journal", "journal",
            "Journal name is required.", "Please provide the journal name.",
        ),
        _text("volume", "volume", empty="Please provide the journal volume."),
        _text("issue", "issue", empty="Please provide the journal issue."),
        _text("pages", "pages", empty="Please provide the page numbers."),
        _text(
            "publisher", "publisher",
            "Publisher is required.", "Please provide the publisher for the journal.",
        ),
    ),
)

CONFERENCE = ResourceDescriptor(
    kind=ResourceKind.CONFERENCE,
    label="Conference",
    fields=(
        _text(
            "title", "title",
            "A conference title is required.",
            "Please provide a title for the conference.",
        ),
        _text(
            "authors", "authors",
            "Conference authors are required.",
            "Please provide authors for the conference.",
        ),
        _date(
            "publicationDate", "publication_date",
            "Publication date is required.",
            "Please provide a valid publication date.",
            date_only=True,
        ),
        _text(
            "conference", "conference",
            "Conference name is required.", "Please provide the conference name.",
        ),
        _text("volume", "volume"),
        _text("issue", "issue"),
        _text("pages", "pages"),
    ),
)

BOOK = ResourceDescriptor(
    kind=ResourceKind.BOOK,
    label="Book",
    fields=(
        _text(
            "title", "title",
            "A book title is required.", "Please provide a title for the book.",
        ),
        _text(
            "authors", "authors",
            "Book authors are required.", "Please provide authors for the book.",
        ),
        _date(
            "publicationDate", "publication_date",
            "Publication date is required.",
            "Please provide a valid publication date.",
            date_only=False,
        ),
        _text("volume", "volume"),
        _text(
            "pages", "pages",
            "Number of pages is required.",
            "Please provide the number of pages for the book.",
        ),
    ),
)

PATENT = ResourceDescriptor(
    kind=ResourceKind.PATENT,
    label="Patent",
    fields=(
        _text(
            "title", "title",
            "A patent title is required.", "Please provide a title for the patent.",
        ),
        _text(
            "inventors", "inventors",
            "Patent inventors are required.",
            "Please provide inventors for the patent.",
        ),
        _date(
            "publicationDate", "publication_date",
            "Publication date is required.",
            "Please provide a valid publication date.",
            date_only=False,
        ),
        _text(
            "patentOffice", "patent_office",
            "Patent office is required.", "Please select a patent office.",
        ),
        _text(
            "patentNumber", "patent_number",
            "Patent number is required.", "Please provide a patent number.",
            unique="patentNumber must be unique",
        ),
        _text(
            "applicationNumber", "application_number",
            "Application number is required.",
            "Please provide an application number.",
            unique="applicationNumber must be unique",
        ),
    ),
)

DESCRIPTORS: dict[ResourceKind, ResourceDescriptor] = {
    d.kind: d for d in (COURSE, EVENT, JOURNAL, CONFERENCE, BOOK, PATENT)
}


def descriptor_for(kind: ResourceKind) -> ResourceDescriptor:
    return DESCRIPTORS[kind]
