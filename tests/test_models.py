"""Tests for CheckInRecord: construction, field access, and views."""

from typing import get_args

import pytest

from petcheckin.models import PET_TYPES, CheckInRecord, PetType


@pytest.fixture
def record():
    return CheckInRecord("dog", "Rex", 3, 30, 12, 5, 150.0)


def test_constructor_scenario(record):
    assert record.pet_type == "dog"
    assert record.pet_age == 3
    assert record.days_stay == 5
    assert record.amount_due == 150.0


def test_every_field_reads_back_constructor_value():
    rec = CheckInRecord("cat", "Tom", 11, 7, 2, 14, 99.5)
    assert rec.pet_type == "cat"
    assert rec.pet_name == "Tom"
    assert rec.pet_age == 11
    assert rec.dog_spaces == 7
    assert rec.cat_spaces == 2
    assert rec.days_stay == 14
    assert rec.amount_due == 99.5


def test_constructor_does_not_validate_pet_type():
    rec = CheckInRecord("bird", "Tweety", -1, 0, 0, 0, 0.0)
    assert rec.pet_type == "bird"
    assert rec.pet_age == -1


def test_constructor_does_not_derive_amount_due():
    rec = CheckInRecord("dog", "Rex", 3, 30, 12, 10, 0.0)
    assert rec.amount_due == 0.0


@pytest.mark.parametrize(
    "field, value",
    [
        ("dog_spaces", 0),
        ("dog_spaces", -4),
        ("cat_spaces", 25),
        ("cat_spaces", -1),
        ("days_stay", 0),
        ("days_stay", -3),
        ("amount_due", 0.0),
        ("amount_due", -12.75),
    ],
)
def test_direct_assignment_reads_back(record, field, value):
    setattr(record, field, value)
    assert getattr(record, field) == value


def test_direct_assignment_is_idempotent(record):
    record.days_stay = 9
    once = record.to_dict()
    record.days_stay = 9
    assert record.to_dict() == once


def test_to_dict_has_all_fields(record):
    assert record.to_dict() == {
        "pet_type": "dog",
        "pet_name": "Rex",
        "pet_age": 3,
        "dog_spaces": 30,
        "cat_spaces": 12,
        "days_stay": 5,
        "amount_due": 150.0,
    }


def test_receipt_leaves_out_capacity(record):
    receipt = record.to_receipt()
    assert "dog_spaces" not in receipt
    assert "cat_spaces" not in receipt
    assert receipt["pet_name"] == "Rex"
    assert receipt["amount_due"] == 150.0


def test_pet_types():
    assert PET_TYPES == ("dog", "cat")


def test_pet_types_match_pet_type_literal():
    assert set(get_args(PetType)) == set(PET_TYPES)
