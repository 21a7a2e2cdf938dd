"""Resource Kinds — tests for the six resource descriptors.

Tests cover:
    - exactly one descriptor per ResourceKind
    - no descriptor declares the owner field (it comes from the caller)
    - empty create payloads report every required-field message, in order
    - unique fields are declared only where the store enforces them
    - bounded text columns reject values longer than the column
"""

import pytest

from scholarlog.core.domain_types import TEXT_COLUMN_LENGTH, ResourceKind
from scholarlog.core.field_rules import evaluate_fields
from scholarlog.core.resource_kinds import (
    BOOK, COURSE, DESCRIPTORS, EVENT, OWNER_FIELD, PATENT, descriptor_for,
)


def test_every_kind_has_a_descriptor():
    assert set(DESCRIPTORS) == set(ResourceKind)
    for kind in ResourceKind:
        assert descriptor_for(kind).kind is kind


@pytest.mark.parametrize("kind", list(ResourceKind))
def test_owner_field_is_never_client_settable(kind):
    assert OWNER_FIELD not in descriptor_for(kind).field_names


def test_course_empty_payload_reports_required_fields():
    report = evaluate_fields(COURSE.fields, {})
    assert report.violations == [
        "A title is required",
        "A description is required",
    ]


def test_course_empty_strings_report_provide_messages():
    report = evaluate_fields(COURSE.fields, {"title": "", "description": " "})
    assert report.violations == [
        "Please provide a title",
        "Please provide a description",
    ]


def test_event_date_must_be_a_date():
    report = evaluate_fields(EVENT.fields, {"eventDate": "soon"}, partial=True)
    assert report.violations == ["Please provide a valid date."]


def test_book_requires_pages():
    report = evaluate_fields(BOOK.fields, {})
    assert "Number of pages is required." in report.violations
    assert "Publication date is required." in report.violations


def test_patent_declares_two_unique_fields():
    unique = [rule.name for rule in PATENT.fields if rule.is_unique]
    assert unique == ["patentNumber", "applicationNumber"]


def test_only_patent_has_unique_fields():
    for kind, descriptor in DESCRIPTORS.items():
        if kind is ResourceKind.PATENT:
            continue
        assert not any(rule.is_unique for rule in descriptor.fields)


def test_plural_matches_collection_path():
    assert COURSE.plural == "courses"
    assert PATENT.plural == "patents"


def test_over_long_title_is_reported():
    payload = {
        "title": "t" * (TEXT_COLUMN_LENGTH + 1),
        "authors": "A. Lovelace",
        "publicationDate": "2020-01-10",
        "pages": "320",
    }
    report = evaluate_fields(BOOK.fields, payload)
    assert report.violations == ["title must be 255 characters or less."]


def test_column_width_is_accepted():
    report = evaluate_fields(BOOK.fields, {"title": "t" * TEXT_COLUMN_LENGTH}, partial=True)
    assert report.ok


@pytest.mark.parametrize("descriptor, name", [
    (COURSE, "description"), (COURSE, "materialsNeeded"), (EVENT, "description"),
])
def test_unbounded_text_fields_accept_long_values(descriptor, name):
    report = evaluate_fields(descriptor.fields, {name: "x" * 5000}, partial=True)
    assert report.ok


@pytest.mark.parametrize("kind", list(ResourceKind))
def test_empty_value_reports_only_the_provide_message(kind):
    report = evaluate_fields(descriptor_for(kind).fields, {"title": ""}, partial=True)
    assert len(report.violations) == 1
