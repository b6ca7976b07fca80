"""
Unit tests for value objects and entities.
"""

import dataclasses
from datetime import date, time
from uuid import uuid4

import pytest

from cleaning_dispatch.domain.entities.cleaning_request import CleaningRequest
from cleaning_dispatch.domain.entities.profile import Profile
from cleaning_dispatch.domain.exceptions.validation_error import (
    InvalidFormatError,
    InvalidInputError,
    RequiredFieldError,
)
from cleaning_dispatch.domain.value_objects.home_size import HomeSize
from cleaning_dispatch.domain.value_objects.location import Location
from cleaning_dispatch.domain.value_objects.request_status import RequestStatus
from cleaning_dispatch.domain.value_objects.user_role import UserRole


class TestRequestStatus:
    """Test RequestStatus value object."""

    def test_enum_values(self):
        expected_values = [
            "pending",
            "assigned",
            "in_progress",
            "awaiting_confirmation",
            "completed",
            "cancelled",
        ]
        assert [status.value for status in RequestStatus] == expected_values

    def test_is_final(self):
        assert RequestStatus.COMPLETED.is_final() is True
        assert RequestStatus.CANCELLED.is_final() is True
        assert RequestStatus.PENDING.is_final() is False
        assert RequestStatus.AWAITING_CONFIRMATION.is_final() is False

    def test_is_active(self):
        assert RequestStatus.ASSIGNED.is_active() is True
        assert RequestStatus.IN_PROGRESS.is_active() is True
        assert RequestStatus.PENDING.is_active() is False


class TestLocation:
    """Test Location value object."""

    def test_full_address(self, sample_location):
        assert sample_location.full_address == "Sample street 1, Moda, Kadikoy/Istanbul"

    @pytest.mark.parametrize(
        "field_name", ["city", "district", "neighborhood", "address_detail"]
    )
    def test_blank_field_rejected(self, field_name):
        data = {
            "city": "Istanbul",
            "district": "Kadikoy",
            "neighborhood": "Moda",
            "address_detail": "Sample street 1",
        }
        data[field_name] = "   "
        with pytest.raises(RequiredFieldError) as exc_info:
            Location(**data)
        assert exc_info.value.field_name == field_name

    def test_immutability(self, sample_location):
        with pytest.raises(dataclasses.FrozenInstanceError):
            sample_location.city = "Ankara"


class TestProfile:
    """Test Profile entity."""

    def test_role_coerced_from_string(self):
        profile = Profile(
            id=uuid4(), email="a@example.com", full_name="A", role="employee"
        )
        assert profile.role == UserRole.EMPLOYEE
        assert profile.is_employee
        assert not profile.is_admin
        assert profile.created_at is not None

    def test_invalid_email(self):
        with pytest.raises(InvalidFormatError):
            Profile(id=uuid4(), email="not-an-email", full_name="A", role="customer")

    def test_unknown_role(self):
        with pytest.raises(InvalidInputError):
            Profile(id=uuid4(), email="a@example.com", full_name="A", role="owner")


class TestCleaningRequest:
    """Test CleaningRequest entity."""

    def test_defaults(self, make_request):
        request = make_request()
        assert request.status == RequestStatus.PENDING
        assert request.employee_count == 1
        assert request.assigned_employee_ids == []
        assert request.created_at is not None
        assert request.updated_at == request.created_at

    def test_values_coerced_from_strings(self, make_request):
        request = make_request(home_size="large", status="awaiting_confirmation")
        assert request.home_size == HomeSize.LARGE
        assert request.status == RequestStatus.AWAITING_CONFIRMATION

    @pytest.mark.parametrize("employee_count", [0, 6, True, "2"])
    def test_employee_count_out_of_range(self, make_request, employee_count):
        with pytest.raises(InvalidInputError):
            make_request(employee_count=employee_count)

    def test_blank_notes_become_none(self, make_request):
        assert make_request(special_notes="  ").special_notes is None

    def test_missing_service_date(self, make_request):
        with pytest.raises(RequiredFieldError):
            make_request(service_date=None)

    def test_ownership_and_assignment(self, make_request, customer_profile):
        employee_id = uuid4()
        request = make_request(employee_count=2, assigned_employee_ids=[employee_id])

        assert request.is_owned_by(customer_profile.id)
        assert not request.is_owned_by(uuid4())
        assert request.is_assigned_to(employee_id)

    def test_to_dict(self, make_request):
        data = make_request(service_date=date(2026, 11, 2), service_time=time(9, 30)).to_dict()
        assert data["service_date"] == "2026-11-02"
        assert data["service_time"] == "09:30"
        assert data["address"] == "Sample street 1, Moda, Kadikoy/Istanbul"
        assert data["status"] == "pending"
