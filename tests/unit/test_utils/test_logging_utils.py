"""Tests for structured logging helpers."""

import pytest
from src.utils.logging import (
    correlation_context,
    get_correlation_id,
    mask_record,
    mask_sensitive_data,
    sanitize_message_text,
)
from src.utils.logging_config import LoggingConfig


@pytest.fixture
def masking_enabled(monkeypatch):
    monkeypatch.setattr(LoggingConfig, "LOG_MASK_SENSITIVE", True)
    monkeypatch.setattr(LoggingConfig, "LOG_MESSAGE_CONTENT", True)


@pytest.mark.unit
def test_mask_sensitive_data(masking_enabled):
    """Test e-mails and phone numbers are redacted."""
    text = "Reach me at jane@example.com or +1 (555) 867-5309"
    masked = mask_sensitive_data(text)
    
    assert "jane@example.com" not in masked
    assert "867-5309" not in masked
    assert "[REDACTED_EMAIL]" in masked
    assert "[REDACTED_PHONE]" in masked


@pytest.mark.unit
def test_mask_record(masking_enabled):
    """Test contact fields are redacted and other fields kept."""
    record = {"id": 1, "name": "Jane", "email": "jane@example.com", "phone": "", "type": "General"}
    masked = mask_record(record)
    
    assert masked["email"] == "[REDACTED]"
    assert masked["phone"] == ""
    assert masked["name"] == "Jane"
    assert record["email"] == "jane@example.com"


@pytest.mark.unit
def test_mask_record_disabled(monkeypatch):
    monkeypatch.setattr(LoggingConfig, "LOG_MASK_SENSITIVE", False)
    record = {"email": "jane@example.com"}
    
    assert mask_record(record) == record


@pytest.mark.unit
def test_sanitize_message_text_truncates(masking_enabled):
    """Test long messages are truncated."""
    result = sanitize_message_text("x" * 50, max_length=10)
    
    assert result == "x" * 10 + "..."
    assert sanitize_message_text("") is None


@pytest.mark.unit
def test_correlation_context_restores_previous():
    """Test correlation IDs are scoped to the context."""
    assert get_correlation_id() is None
    
    with correlation_context("req_outer"):
        with correlation_context() as inner:
            assert inner.startswith("req_")
            assert get_correlation_id() == inner
        assert get_correlation_id() == "req_outer"
    
    assert get_correlation_id() is None
