# Logging adapté au texte issu des fichiers scannés
from .safe_logger import SafeLoggerAdapter, configure_logging, get_safe_logger, sanitize_for_log

__all__ = ['SafeLoggerAdapter', 'configure_logging', 'get_safe_logger', 'sanitize_for_log']
