"""Unit tests for domain errors."""

from uuid import UUID

from museum_api.errors import (
    BusinessRuleViolation,
    ConflictError,
    ErrorCode,
    EventNotFoundError,
    NotFoundError,
)


class TestDomainErrors:

    def test_conflict_is_a_business_rule_violation(self):
        error = ConflictError("Date 2025-10-20 already exists")

        assert isinstance(error, BusinessRuleViolation)
        assert error.code is ErrorCode.CONFLICT

    def test_event_not_found_keeps_id(self):
        event_id = UUID("d28888e9-2ba9-473a-a40f-e38cb54f9b35")
        error = EventNotFoundError(event_id)

        assert isinstance(error, NotFoundError)
        assert error.event_id == event_id
        assert str(error) == f"NOT_FOUND: Special event with ID {event_id} not found"
