"""
test_sentry.py

Tests for the Sentry integration: initialization, exception capture,
breadcrumbs and shutdown.
"""

import pytest
from unittest.mock import Mock, patch, MagicMock


@pytest.fixture(autouse=True)
def reset_sentry_state():
    """Reset Sentry state before and after each test"""
    import kaiascan.utils.sentry as sentry_module
    sentry_module._sentry_initialized = False
    yield
    sentry_module._sentry_initialized = False


@pytest.fixture
def mock_config():
    config = Mock()
    config.SENTRY_ENABLED = False
    config.SENTRY_DSN = ""
    config.SENTRY_ENVIRONMENT = "test"
    config.SENTRY_TRACES_SAMPLE_RATE = 1.0
    return config


@pytest.fixture
def enabled_config():
    config = Mock()
    config.SENTRY_ENABLED = True
    config.SENTRY_DSN = "https://test@sentry.io/12345"
    config.SENTRY_ENVIRONMENT = "testing"
    config.SENTRY_TRACES_SAMPLE_RATE = 0.5
    return config


class TestInitSentry:

    @patch('kaiascan.utils.sentry.get_config')
    @patch('kaiascan.utils.sentry.sentry_sdk')
    def test_init_sentry_disabled(self, mock_sentry_sdk, mock_get_config, mock_config):
        from kaiascan.utils.sentry import init_sentry

        mock_get_config.return_value = mock_config

        assert init_sentry() is False
        mock_sentry_sdk.init.assert_not_called()

    @patch('kaiascan.utils.sentry.get_config')
    @patch('kaiascan.utils.sentry.sentry_sdk')
    def test_init_sentry_enabled_without_dsn(self, mock_sentry_sdk, mock_get_config, enabled_config):
        from kaiascan.utils.sentry import init_sentry

        enabled_config.SENTRY_DSN = ""
        mock_get_config.return_value = enabled_config

        assert init_sentry() is False
        mock_sentry_sdk.init.assert_not_called()

    @patch('kaiascan.utils.sentry.get_config')
    @patch('kaiascan.utils.sentry.sentry_sdk')
    def test_init_sentry_success(self, mock_sentry_sdk, mock_get_config, enabled_config):
        from kaiascan.utils.sentry import init_sentry
        from kaiascan import __version__

        mock_get_config.return_value = enabled_config

        assert init_sentry() is True
        mock_sentry_sdk.init.assert_called_once()
        kwargs = mock_sentry_sdk.init.call_args.kwargs
        assert kwargs['dsn'] == "https://test@sentry.io/12345"
        assert kwargs['environment'] == "testing"
        assert kwargs['traces_sample_rate'] == 0.5
        assert kwargs['release'] == f"kaiascan@{__version__}"
        assert kwargs['send_default_pii'] is False

    @patch('kaiascan.utils.sentry.get_config')
    @patch('kaiascan.utils.sentry.sentry_sdk')
    def test_init_sentry_only_once(self, mock_sentry_sdk, mock_get_config, enabled_config):
        from kaiascan.utils.sentry import init_sentry

        mock_get_config.return_value = enabled_config

        assert init_sentry() is True
        assert init_sentry() is True
        mock_sentry_sdk.init.assert_called_once()

    @patch('kaiascan.utils.sentry.get_config')
    @patch('kaiascan.utils.sentry.sentry_sdk')
    def test_init_sentry_failure(self, mock_sentry_sdk, mock_get_config, enabled_config):
        from kaiascan.utils.sentry import init_sentry

        mock_get_config.return_value = enabled_config
        mock_sentry_sdk.init.side_effect = Exception("bad dsn")

        assert init_sentry() is False


class TestCaptureException:

    @patch('kaiascan.utils.sentry.sentry_sdk')
    def test_capture_skipped_when_not_initialized(self, mock_sentry_sdk):
        from kaiascan.utils.sentry import capture_exception

        assert capture_exception(RuntimeError("boom")) is None
        mock_sentry_sdk.capture_exception.assert_not_called()

    @patch('kaiascan.utils.sentry.sentry_sdk')
    def test_capture_without_context(self, mock_sentry_sdk):
        import kaiascan.utils.sentry as sentry_module
        sentry_module._sentry_initialized = True
        mock_sentry_sdk.capture_exception.return_value = "event-1"
        error = RuntimeError("boom")

        assert sentry_module.capture_exception(error) == "event-1"
        mock_sentry_sdk.capture_exception.assert_called_once_with(error)

    @patch('kaiascan.utils.sentry.sentry_sdk')
    def test_capture_with_context(self, mock_sentry_sdk):
        import kaiascan.utils.sentry as sentry_module
        sentry_module._sentry_initialized = True
        scope = MagicMock()
        mock_sentry_sdk.new_scope.return_value.__enter__.return_value = scope
        mock_sentry_sdk.capture_exception.return_value = "event-2"

        result = sentry_module.capture_exception(RuntimeError("boom"),
                                                 context={"request": {"endpoint": "get_block"}})

        assert result == "event-2"
        scope.set_context.assert_called_once_with("request", {"endpoint": "get_block"})

    @patch('kaiascan.utils.sentry.sentry_sdk')
    def test_capture_failure_returns_none(self, mock_sentry_sdk):
        import kaiascan.utils.sentry as sentry_module
        sentry_module._sentry_initialized = True
        mock_sentry_sdk.capture_exception.side_effect = Exception("network down")

        assert sentry_module.capture_exception(RuntimeError("boom")) is None


class TestBreadcrumbsAndClose:

    @patch('kaiascan.utils.sentry.sentry_sdk')
    def test_breadcrumb_skipped_when_not_initialized(self, mock_sentry_sdk):
        from kaiascan.utils.sentry import add_breadcrumb

        add_breadcrumb("GET https://example")

        mock_sentry_sdk.add_breadcrumb.assert_not_called()

    @patch('kaiascan.utils.sentry.sentry_sdk')
    def test_breadcrumb_recorded(self, mock_sentry_sdk):
        import kaiascan.utils.sentry as sentry_module
        sentry_module._sentry_initialized = True

        sentry_module.add_breadcrumb("GET https://example", data={"endpoint": "get_block"})

        mock_sentry_sdk.add_breadcrumb.assert_called_once_with(
            message="GET https://example", category="kaiascan", level="info",
            data={"endpoint": "get_block"})

    @patch('kaiascan.utils.sentry.sentry_sdk')
    def test_close_flushes(self, mock_sentry_sdk):
        import kaiascan.utils.sentry as sentry_module
        sentry_module._sentry_initialized = True

        sentry_module.close_sentry(timeout=1)

        mock_sentry_sdk.flush.assert_called_once_with(timeout=1)
        assert sentry_module._sentry_initialized is False
