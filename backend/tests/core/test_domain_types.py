"""Domain Types — verifies identities, kinds and request stages.

Tests:
    - ResourceKind has exactly the six tracked record types
    - Operation success statuses (201 create, 204 update/delete, 200 reads)
    - Principal is immutable
    - parse_record_id accepts only ids a row can carry
"""

import dataclasses

import pytest

from scholarlog.core.domain_types import (
    MAX_RECORD_ID, Operation, Principal, RequestStage, ResourceKind, UserId,
    parse_record_id,
)


def test_resource_kind_has_six_members():
    assert [k.value for k in ResourceKind] == [
        "course", "event", "journal", "conference", "book", "patent",
    ]


def test_operation_success_statuses():
    assert Operation.CREATE.success_status == 201
    assert Operation.UPDATE.success_status == 204
    assert Operation.DELETE.success_status == 204
    assert Operation.LIST.success_status == 200
    assert Operation.GET.success_status == 200


def test_request_stages_are_ordered():
    assert list(RequestStage)[0] is RequestStage.UNAUTHENTICATED
    assert list(RequestStage)[-1] is RequestStage.COMMITTED


def test_principal_is_frozen():
    principal = Principal(id=UserId(1), identifier="a@x.com")
    with pytest.raises(dataclasses.FrozenInstanceError):
        principal.id = UserId(2)


@pytest.mark.parametrize("raw, expected", [
    ("1", 1), (42, 42), ("007", 7), (str(MAX_RECORD_ID), MAX_RECORD_ID),
])
def test_parse_record_id_accepts_stored_range(raw, expected):
    assert parse_record_id(raw) == expected


@pytest.mark.parametrize("raw", [
    "abc", "", " 1", "1.0", "-1", "+1", "0", 0, -5, True,
    str(MAX_RECORD_ID + 1), "99999999999999999999", "9" * 5000, "١٢", None,
])
def test_parse_record_id_rejects_ids_no_row_can_carry(raw):
    assert parse_record_id(raw) is None
