"""Domain error types: instantiation, hierarchy and message preservation."""

from __future__ import annotations

import pytest

from smtpsend.domain.errors import (
    ConfigurationError,
    NoRecipientsError,
    NoSenderError,
    ValidationError,
)


@pytest.mark.os_agnostic
def test_no_recipients_error_carries_fixed_message() -> None:
    """The message text is fixed so callers can match on it."""
    assert str(NoRecipientsError()) == "no recipients specified"


@pytest.mark.os_agnostic
def test_no_recipients_error_is_a_validation_error() -> None:
    """Catching ValidationError covers the recipient check."""
    with pytest.raises(ValidationError, match="no recipients specified"):
        raise NoRecipientsError()


@pytest.mark.os_agnostic
def test_validation_error_is_value_error() -> None:
    """ValidationError stays catchable as ValueError."""
    assert issubclass(ValidationError, ValueError)


@pytest.mark.os_agnostic
def test_configuration_error_preserves_message() -> None:
    """Instantiation stores the message for display."""
    exc = ConfigurationError("No SMTP host configured")
    assert str(exc) == "No SMTP host configured"


@pytest.mark.os_agnostic
def test_no_sender_error_carries_fixed_message() -> None:
    """An empty sender address is a validation failure with a fixed text."""
    exc = NoSenderError()

    assert str(exc) == "no sender address specified"
    assert isinstance(exc, ValidationError)
