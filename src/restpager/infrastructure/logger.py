# -*- coding: utf-8 -*-

import os
import logging
import tempfile
from logging.handlers import RotatingFileHandler
from typing import Optional
import time
import functools


class PerformanceLogger:
    """Performans ve işlem logları için logger sınıfı"""

    def __init__(
        self,
        name: str = "restpager",
        log_dir: Optional[str] = None,
        debug_mode: Optional[bool] = None,
    ):
        self.name = name
        self.log_dir = log_dir or self._get_default_log_dir()
        # Debug modunu environment variable'dan kontrol et
        self.debug_mode = (
            debug_mode
            if debug_mode is not None
            else os.getenv("RESTPAGER_DEBUG", "false").lower() == "true"
        )
        self._ensure_log_dir()
        self._setup_loggers()

    def _get_default_log_dir(self) -> str:
        """Varsayılan log dizinini oluştur"""
        env_dir = os.getenv("RESTPAGER_LOG_DIR")
        if env_dir:
            return env_dir
        temp_dir = tempfile.gettempdir()
        return os.path.join(temp_dir, "restpager", "logs")

    def _ensure_log_dir(self):
        """Log dizinini oluştur"""
        os.makedirs(self.log_dir, exist_ok=True)

    def _setup_loggers(self):
        """Logger'ları kur"""
        self.main_logger = self._create_logger(
            name=f"{self.name}_main", filename="restpager_main.log", level=logging.INFO
        )

        self.performance_logger = self._create_logger(
            name=f"{self.name}_performance",
            filename="restpager_performance.log",
            level=logging.INFO,
        )

        self.error_logger = self._create_logger(
            name=f"{self.name}_error", filename="restpager_error.log", level=logging.ERROR
        )

        self.debug_logger = self._create_logger(
            name=f"{self.name}_debug", filename="restpager_debug.log", level=logging.DEBUG
        )

    def _create_logger(self, name: str, filename: str, level: int) -> logging.Logger:
        """Logger oluştur"""
        logger = logging.getLogger(name)
        logger.setLevel(level)
        logger.propagate = False

        # Eğer handler zaten varsa, kapat ve yeniden ekle
        for old_handler in list(logger.handlers):
            logger.removeHandler(old_handler)
            old_handler.close()

        log_file = os.path.join(self.log_dir, filename)

        # Rotating file handler (10MB, 5 dosya)
        handler = RotatingFileHandler(
            log_file, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8"
        )

        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)

        logger.addHandler(handler)

        # Console handler (debug modunda tüm loglar, normal modda sadece hata)
        if self.debug_mode or level == logging.ERROR:
            console_handler = logging.StreamHandler()
            console_handler.setLevel(level)
            console_handler.setFormatter(formatter)
            logger.addHandler(console_handler)

        return logger

    @staticmethod
    def _format(prefix: str, message: str, **kwargs) -> str:
        if prefix:
            message = f"{prefix}: {message}"
        if kwargs:
            details = " | ".join([f"{k}={v}" for k, v in kwargs.items()])
            message += f" | {details}"
        return message

    def log_performance(self, operation: str, duration: float, **kwargs):
        """Performans logu"""
        self.performance_logger.info(
            self._format("PERF", f"{operation} - {duration:.4f}s", **kwargs)
        )

    def log_operation(self, operation: str, **kwargs):
        """Genel işlem logu"""
        self.main_logger.info(self._format("OP", operation, **kwargs))

    def log_error(self, error: str, **kwargs):
        """Hata logu"""
        self.error_logger.error(self._format("ERROR", error, **kwargs))

    def log_debug(self, message: str, **kwargs):
        """Debug logu"""
        self.debug_logger.debug(self._format("", message, **kwargs))


# Global logger instance
_logger_instance: Optional[PerformanceLogger] = None


def get_logger(debug_mode: Optional[bool] = None) -> PerformanceLogger:
    """Global logger instance'ını al"""
    global _logger_instance
    if _logger_instance is None or debug_mode is not None:
        _logger_instance = PerformanceLogger(debug_mode=debug_mode)
    return _logger_instance


def reset_logger():
    """Logger instance'ını sıfırla (test için)"""
    global _logger_instance
    _logger_instance = None


def performance_timer(operation_name: Optional[str] = None):
    """Performans ölçümü decorator'ı"""

    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            start_time = time.time()
            operation = operation_name or f"{func.__module__}.{func.__name__}"

            try:
                result = func(*args, **kwargs)
            except Exception as e:
                duration = time.time() - start_time
                logger = get_logger()
                logger.log_performance(
                    operation=operation,
                    duration=duration,
                    success=False,
                    error=str(e),
                )
                logger.log_error(f"Error in {operation}", error_msg=str(e))
                raise

            duration = time.time() - start_time
            get_logger().log_performance(
                operation=operation,
                duration=duration,
                success=True,
            )
            return result

        return wrapper

    return decorator
