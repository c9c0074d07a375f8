"""Logging configuration for the receipt points service."""

import os
import logging.config
import json
from datetime import datetime
from typing import Dict, Any

def setup_logging(
    log_dir: str = 'logs',
    debug_mode: bool = False,
    log_to_file: bool = False
) -> None:
    """
    Set up logging configuration for the application.

    Args:
        log_dir: Directory to store log files
        debug_mode: Whether to enable debug logging
        log_to_file: Whether to log to files
    """
    level = 'DEBUG' if debug_mode else 'INFO'

    if log_to_file:
        os.makedirs(log_dir, exist_ok=True)

    timestamp = datetime.now().strftime('%Y%m%d')
    log_files = {
        'error': os.path.join(log_dir, f'error_{timestamp}.log'),
        'info': os.path.join(log_dir, f'info_{timestamp}.log')
    }

    config = {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'standard': {
                'format': '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
            },
            'json': {
                '()': 'utils.logging_config.JsonFormatter'
            }
        },
        'handlers': {
            'console': {
                'class': 'logging.StreamHandler',
                'level': level,
                'formatter': 'standard',
                'stream': 'ext://sys.stdout'
            }
        },
        'loggers': {
            '': {  # Root logger
                'handlers': ['console'],
                'level': level,
                'propagate': True
            },
            'werkzeug': {
                'level': 'DEBUG' if debug_mode else 'WARNING'
            }
        }
    }

    if log_to_file:
        config['handlers'].update({
            'error_file': {
                'class': 'logging.handlers.RotatingFileHandler',
                'level': 'ERROR',
                'formatter': 'standard',
                'filename': log_files['error'],
                'maxBytes': 10485760,  # 10MB
                'backupCount': 5
            },
            'info_file': {
                'class': 'logging.handlers.RotatingFileHandler',
                'level': 'INFO',
                'formatter': 'json',
                'filename': log_files['info'],
                'maxBytes': 10485760,  # 10MB
                'backupCount': 5
            }
        })
        config['loggers']['']['handlers'].extend(['error_file', 'info_file'])

    logging.config.dictConfig(config)

    logger = logging.getLogger(__name__)
    logger.info('Logging system initialized')
    if debug_mode:
        logger.debug('Debug mode enabled')

class JsonFormatter(logging.Formatter):
    """Custom JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON string."""
        log_data = {
            'timestamp': self.formatTime(record),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage()
        }

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        # Context attached through log_with_context
        if hasattr(record, 'data'):
            log_data['data'] = record.data

        return json.dumps(log_data, default=str)

def log_with_context(
    logger: logging.Logger,
    level: int,
    msg: str,
    context: Dict[str, Any] = None,
    **kwargs
) -> None:
    """
    Log message with additional context data.

    Args:
        logger: Logger instance
        level: Logging level
        msg: Log message
        context: Additional context data
        **kwargs: Additional logging arguments
    """
    if context:
        extra = {'data': context}
        if 'extra' in kwargs:
            kwargs['extra'].update(extra)
        else:
            kwargs['extra'] = extra

    logger.log(level, msg, **kwargs)
