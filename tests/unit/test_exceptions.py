"""
Tests for custom exceptions.
"""

import pytest


class TestBrowserAutoError:
    """Test the base BrowserAutoError exception."""

    def test_create_base_error(self):
        """Test creating a BrowserAutoError."""
        from browser_auto.exceptions import BrowserAutoError
        error = BrowserAutoError("Something went wrong")
        assert str(error) == "Something went wrong"
        assert error.details == {}

    def test_details_in_message(self):
        """Test details are appended to the message."""
        from browser_auto.exceptions import BrowserAutoError
        error = BrowserAutoError("Broken", {"key": "value"})
        assert str(error) == "Broken - Details: {'key': 'value'}"


class TestDocumentErrors:
    """Test document-related exceptions."""

    def test_element_not_found(self):
        """Test ElementNotFoundError keeps the selector."""
        from browser_auto.exceptions import DocumentError, ElementNotFoundError
        error = ElementNotFoundError("No element matches the selector", selector="#x")
        assert error.selector == "#x"
        assert "#x" in str(error)
        assert isinstance(error, DocumentError)

    def test_document_load_error(self):
        """Test DocumentLoadError keeps the source."""
        from browser_auto.exceptions import DocumentLoadError
        error = DocumentLoadError("Cannot read", source="page.html")
        assert error.source == "page.html"

    def test_unsupported_target(self):
        """Test UnsupportedTargetError keeps the tag."""
        from browser_auto.exceptions import UnsupportedTargetError
        error = UnsupportedTargetError("No selectors for body", tag="body")
        assert error.tag == "body"


class TestBrowserErrors:
    """Test browser-related exceptions."""

    @pytest.mark.parametrize("name", ["BrowserLaunchError", "CaptureError"])
    def test_browser_errors_share_base(self, name):
        """Test browser errors derive from BrowserError."""
        import browser_auto.exceptions as exceptions
        assert issubclass(getattr(exceptions, name), exceptions.BrowserError)
        assert issubclass(getattr(exceptions, name), exceptions.BrowserAutoError)

    def test_capture_error_without_url(self):
        """Test CaptureError without a URL has no details."""
        from browser_auto.exceptions import CaptureError
        error = CaptureError("Capture script returned no document")
        assert str(error) == "Capture script returned no document"
        assert error.url is None
