"""
Tests for core infrastructure components.

Tests sentinels, exceptions, settings and logging configuration.
"""

import copy
import logging
import pickle

import pytest
from unittest.mock import patch
from tsur.core.sentinels import EMPTY, Sentinel, same_value, positive_number, true_predicate
from tsur.core.exceptions import TsurError, UnwrapError
from tsur.core.logging_config import setup_logging, get_logger, configure_from_settings, LOGGER_NAME
from tsur.config.settings import Settings, get_settings, set_settings
import tsur.core


class TestSentinel:
    """Test Sentinel markers."""
    
    def test_sentinel_is_falsy(self):
        """Test sentinels are falsy."""
        assert not EMPTY
    
    def test_sentinel_identity(self):
        """Test sentinels only equal themselves."""
        other = Sentinel('EMPTY')
        
        assert EMPTY == EMPTY
        assert EMPTY != other
        assert EMPTY is not None
    
    def test_sentinel_survives_copy_and_pickle(self):
        """Test copies resolve to the same marker."""
        assert copy.copy(EMPTY) is EMPTY
        assert copy.deepcopy(EMPTY) is EMPTY
        assert pickle.loads(pickle.dumps(EMPTY)) is EMPTY
    
    def test_sentinel_is_read_only(self):
        """Test sentinels cannot be modified."""
        with pytest.raises(AttributeError):
            EMPTY.name = 'other'
    
    def test_repr(self):
        """Test sentinel repr."""
        assert repr(EMPTY) == '<EMPTY>'


class TestSameValue:
    """Test same_value identity comparison."""
    
    def test_same_reference(self):
        """Test the same object is the same value."""
        obj = [1]
        
        assert same_value(obj, obj)
    
    def test_equal_objects_are_not_same(self):
        """Test distinct equal objects differ."""
        assert not same_value([1], [1])
        assert not same_value({'a': 1}, {'a': 1})
    
    def test_primitives(self):
        """Test primitives compare by value."""
        assert same_value(10 ** 20, 10 ** 20)
        assert same_value('a' * 50, 'a' * 50)
        assert same_value(None, None)
        assert not same_value(1, True)
        assert not same_value(1, 1.0)
    
    def test_nan_and_zero(self):
        """Test NaN and signed zero handling."""
        assert same_value(float('nan'), float('nan'))
        assert not same_value(0.0, -0.0)
        assert same_value(-0.0, -0.0)
    
    def test_predicates(self):
        """Test helper predicates."""
        assert positive_number(0)
        assert not positive_number(-1)
        assert true_predicate()
        assert true_predicate(1, 2, 3)


class TestExceptions:
    """Test exception hierarchy."""
    
    def test_unwrap_error_hierarchy(self):
        """Test UnwrapError is catchable as TsurError and ValueError."""
        error = UnwrapError('message', container='c')
        
        assert isinstance(error, TsurError)
        assert isinstance(error, ValueError)
        assert str(error) == 'message'
        assert error.container == 'c'
    
    def test_unwrap_error_without_container(self):
        """Test container defaults to None."""
        assert UnwrapError('message').container is None


class TestSettings:
    """Test Settings."""
    
    def teardown_method(self):
        """Reset the global settings."""
        set_settings(None)
    
    def test_defaults(self, monkeypatch):
        """Test default values."""
        for name in ('TSUR_LOG_LEVEL', 'TSUR_LOG_FILE', 'TSUR_LOG_CAPTURED_TRACEBACKS'):
            monkeypatch.delenv(name, raising=False)
        
        settings = Settings()
        
        assert settings.log_level == 'WARNING'
        assert settings.log_file is None
        assert settings.log_captured_tracebacks is False
        assert settings.validate()
    
    def test_environment_overrides(self, monkeypatch):
        """Test environment variables override defaults."""
        monkeypatch.setenv('TSUR_LOG_LEVEL', 'debug')
        monkeypatch.setenv('TSUR_LOG_CAPTURED_TRACEBACKS', 'TRUE')
        
        settings = Settings()
        
        assert settings.log_level == 'debug'
        assert settings.log_captured_tracebacks is True
        assert settings.validate()
    
    def test_invalid_level(self, monkeypatch):
        """Test validate rejects unknown levels."""
        monkeypatch.setenv('TSUR_LOG_LEVEL', 'LOUD')
        
        assert Settings().validate() is False
    
    def test_get(self):
        """Test get with defaults."""
        settings = Settings()
        
        assert settings.get('log_format') == settings.log_format
        assert settings.get('missing', 'fallback') == 'fallback'
        assert settings.get('log_format.missing') is None
    
    def test_to_dict(self):
        """Test dictionary export."""
        data = Settings().to_dict()
        
        assert set(data) == {'log_level', 'log_format', 'log_file', 'log_captured_tracebacks'}
    
    def test_get_settings_singleton(self):
        """Test get_settings returns singleton."""
        assert get_settings() is get_settings()
    
    def test_dotenv_loaded_on_first_get_settings(self):
        """Test the .env file is loaded lazily, once."""
        set_settings(None)
        
        with patch('tsur.config.settings.load_dotenv') as load_dotenv:
            get_settings()
            get_settings()
        
        load_dotenv.assert_called_once_with()
    
    def test_set_settings_skips_dotenv(self):
        """Test explicit settings do not trigger .env loading."""
        set_settings(Settings())
        
        with patch('tsur.config.settings.load_dotenv') as load_dotenv:
            get_settings()
        
        load_dotenv.assert_not_called()
    
    def test_set_settings(self):
        """Test set_settings replaces the singleton."""
        settings = Settings()
        set_settings(settings)
        
        assert get_settings() is settings


class TestLogging:
    """Test logging configuration."""
    
    def teardown_method(self):
        """Remove handlers added by the tests."""
        logger = logging.getLogger(LOGGER_NAME)
        for handler in list(logger.handlers):
            if not isinstance(handler, logging.NullHandler):
                logger.removeHandler(handler)
                handler.close()
        logger.setLevel(logging.NOTSET)
    
    def test_core_exports_logging_helpers(self):
        """Test the core package re-exports the logging helpers."""
        assert tsur.core.get_logger is get_logger
        assert tsur.core.setup_logging is setup_logging
        assert tsur.core.configure_from_settings is configure_from_settings
        assert {'get_logger', 'setup_logging', 'configure_from_settings'} <= set(tsur.core.__all__)
    
    def test_get_logger(self):
        """Test module loggers live under the tsur namespace."""
        assert get_logger('tsur.result').parent.name == LOGGER_NAME
        assert get_logger('tsur.result') is logging.getLogger('tsur.result')
    
    def test_setup_logging(self, tmp_path):
        """Test handlers and level are installed."""
        log_file = tmp_path / 'logs' / 'tsur.log'
        
        setup_logging(level='debug', log_file=str(log_file))
        get_logger('tsur.test').debug('hello')
        
        logger = logging.getLogger(LOGGER_NAME)
        assert logger.level == logging.DEBUG
        for handler in logger.handlers:
            handler.flush()
        assert 'hello' in log_file.read_text()
    
    def test_setup_logging_replaces_handlers(self):
        """Test repeated setup does not stack handlers."""
        setup_logging()
        setup_logging()
        
        logger = logging.getLogger(LOGGER_NAME)
        active = [h for h in logger.handlers if not isinstance(h, logging.NullHandler)]
        assert len(active) == 1
    
    def test_configure_from_settings(self, monkeypatch):
        """Test configuration from a Settings object."""
        monkeypatch.delenv('TSUR_LOG_FILE', raising=False)
        monkeypatch.setenv('TSUR_LOG_LEVEL', 'ERROR')
        
        configure_from_settings(Settings())
        
        assert logging.getLogger(LOGGER_NAME).level == logging.ERROR
