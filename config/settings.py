"""Configuration settings for the receipt points service."""
import os


def _env_flag(name: str, default: str = '0') -> bool:
    return os.getenv(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


class ServiceConfig:
    """Configuration class for the HTTP service, storage and logging settings."""

    def __init__(self):
        """Initialize configuration from environment variables."""
        self.host: str = os.getenv('RECEIPT_POINTS_HOST', '0.0.0.0')
        self.port: int = int(os.getenv('RECEIPT_POINTS_PORT', '8080'))
        self.debug: bool = _env_flag('FLASK_DEBUG')
        self.id_max_attempts: int = int(os.getenv('RECEIPT_ID_MAX_ATTEMPTS', '3'))
        self.log_dir: str = os.getenv('LOG_DIR', 'logs')
        self.log_to_file: bool = _env_flag('LOG_TO_FILE')

    def validate(self) -> None:
        """Validate the configuration settings."""
        if not 0 < self.port < 65536:
            raise ValueError(f"Port must be between 1 and 65535, got {self.port}")

        if self.id_max_attempts < 1:
            raise ValueError("Receipt id max attempts must be at least 1")

        if self.log_to_file and not self.log_dir:
            raise ValueError("Log directory must be set when logging to file")

    def to_dict(self) -> dict:
        """Convert configuration to dictionary."""
        return {
            'host': self.host,
            'port': self.port,
            'debug': self.debug,
            'id_max_attempts': self.id_max_attempts,
            'log_dir': self.log_dir,
            'log_to_file': self.log_to_file
        }

    @classmethod
    def from_dict(cls, config_dict: dict) -> 'ServiceConfig':
        """Create configuration from dictionary, falling back to the environment."""
        instance = cls()
        for key in ('host', 'port', 'debug', 'id_max_attempts', 'log_dir', 'log_to_file'):
            value = config_dict.get(key)
            if value is not None:
                setattr(instance, key, value)
        return instance
