"""Message Content Enforcement — tests for check_content_valid.

Tests cover:
    - None rejected, empty string accepted
    - exactly MAX_CONTENT_LENGTH accepted, one more rejected
    - length counted in characters, not UTF-8 bytes
    - content returned unmodified
"""

import pytest

from simple_api.core.domain_types import MAX_CONTENT_LENGTH
from simple_api.core.enforce_message import check_content_valid
from simple_api.core.errors import ContentValidationError


def test_none_content_rejected():
    with pytest.raises(ContentValidationError) as exc_info:
        check_content_valid(None)
    assert exc_info.value.field == "content"
    assert exc_info.value.http_status == 400


def test_empty_content_accepted():
    assert check_content_valid("") == ""


def test_max_length_accepted():
    content = "a" * MAX_CONTENT_LENGTH
    assert check_content_valid(content) == content


def test_over_max_length_rejected():
    with pytest.raises(ContentValidationError) as exc_info:
        check_content_valid("a" * (MAX_CONTENT_LENGTH + 1))
    assert "1000" in exc_info.value.message


def test_length_counts_characters_not_bytes():
    content = "ö" * MAX_CONTENT_LENGTH  # 2000 bytes in UTF-8
    assert check_content_valid(content) == content


def test_whitespace_is_not_stripped():
    assert check_content_valid("  hej  ") == "  hej  "
