import pytest

from expression_kernel.config import reset_config
from expression_kernel.logging_system import configure_logging, LogLevel


@pytest.fixture(autouse=True)
def fresh_settings():
    """Every test starts from default configuration and silent logging"""
    reset_config()
    configure_logging(LogLevel.SILENT)
    yield
    reset_config()
    configure_logging(LogLevel.SILENT)
