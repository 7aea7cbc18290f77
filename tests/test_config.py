"""
Tests for configuration and structured logging
"""

import json
import logging

from bank_account.config import BankConfig, get_config, reload_config
from bank_account.logging_config import JSONFormatter, setup_logging, get_logger, log_action


class TestConfig:
    """Test environment-based configuration"""
    
    def test_defaults(self):
        """Test default values"""
        config = BankConfig()
        
        assert config.api_port == 8090
        assert config.log_level == "INFO"
    
    def test_environment_override(self, monkeypatch):
        """Test BANK_ prefixed environment variables"""
        monkeypatch.setenv("BANK_API_PORT", "9000")
        monkeypatch.setenv("BANK_LOG_LEVEL", "DEBUG")
        
        config = reload_config()
        try:
            assert config.api_port == 9000
            assert config.log_level == "DEBUG"
            assert get_config() is config
        finally:
            monkeypatch.delenv("BANK_API_PORT")
            monkeypatch.delenv("BANK_LOG_LEVEL")
            reload_config()


class TestLogging:
    """Test structured logging helpers"""
    
    def test_json_formatter(self):
        """Test that records format as JSON with extra fields"""
        logger = logging.getLogger("bank_account.test_json")
        record = logger.makeRecord(logger.name, logging.INFO, __name__, 0, "hello", (), None)
        record.action = "deposit"
        record.extra = {"amount": 10}
        
        data = json.loads(JSONFormatter().format(record))
        
        assert data["level"] == "INFO"
        assert data["message"] == "hello"
        assert data["action"] == "deposit"
        assert data["extra"] == {"amount": 10}
        assert "resource" not in data
    
    def test_setup_logging_replaces_handlers(self):
        """Test that repeated setup does not stack handlers"""
        logger = setup_logging("DEBUG", "bank_account.test_setup")
        logger = setup_logging("WARNING", "bank_account.test_setup", log_format="text")
        
        assert len(logger.handlers) == 1
        assert logger.level == logging.WARNING
        assert not logger.propagate
        assert get_logger("bank_account.test_setup") is logger
    
    def test_log_action_respects_level(self, caplog):
        """Test that disabled levels are skipped"""
        logger = logging.getLogger("bank_account.test_action")
        caplog.set_level(logging.INFO, logger="bank_account.test_action")
        
        log_action(logger, "debug", "hidden")
        log_action(logger, "info", "shown", action="withdraw", extra={"amount": 5})
        
        messages = [r.getMessage() for r in caplog.records]
        assert messages == ["shown"]
        assert caplog.records[0].action == "withdraw"
