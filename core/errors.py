"""Errors raised by the planning core. None of them are retried."""

from __future__ import annotations


class PlanningError(Exception):
    """Base class for every failure the planning core reports."""


class ValidationError(PlanningError):
    """A profile field is missing, non-numeric, or physically invalid."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


class MissingProfileError(PlanningError):
    """A plan was requested for a user whose profile was never stored."""

    def __init__(self, user_id: str) -> None:
        super().__init__(f"no profile stored for user {user_id!r}")
        self.user_id = user_id
