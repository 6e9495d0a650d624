# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Domain exceptions raised by the calendar core and its services."""


class TimetrackError(Exception):
    """Base class for all domain errors."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(TimetrackError):
    """Raised when a calendar configuration or request is semantically invalid."""

    status_code = 422


class InvalidRecurrenceRuleError(ValidationError):
    """Raised when a recurrence rule's pattern payload is inconsistent."""


class NotFoundError(TimetrackError):
    """Raised when a referenced entity does not exist."""

    status_code = 404

    def __init__(self, entity: str, entity_id: object):
        super().__init__(f"{entity} not found: {entity_id}")
        self.entity = entity
        self.entity_id = entity_id


class ForbiddenError(TimetrackError):
    """Raised when an entity exists but belongs to another user."""

    status_code = 403


class ConflictError(TimetrackError):
    """Raised when a write would violate a uniqueness rule."""

    status_code = 409


class ExemptionAlreadyExistsError(ConflictError):
    """Raised when a rule already carries an exemption for the date."""
