"""
Система логирования для шахматной доски.
"""
import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

import config

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
MAX_LOG_BYTES = 10 * 1024 * 1024  # 10 MB
LOG_BACKUPS = 5

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def setup_logger(name: str = config.LOGGER_NAME, log_dir: str = config.LOG_DIR,
                 console_level: Optional[str] = None) -> logging.Logger:
    """
    Настраивает и возвращает logger.
    
    Консоль получает сообщения начиная с console_level (по умолчанию
    CHESS_LOG_LEVEL), файл - всё начиная с DEBUG.
    
    Args:
        name: Имя логгера
        log_dir: Директория для логов
        console_level: Уровень консольного обработчика ("DEBUG", "INFO", ...)
        
    Returns:
        Настроенный logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)
    
    # Не добавляем обработчики повторно
    if logger.handlers:
        return logger
    
    Path(log_dir).mkdir(parents=True, exist_ok=True)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    
    level_name = (console_level or config.LOG_LEVEL).upper()
    console_handler = logging.StreamHandler()
    console_handler.setLevel(LEVELS.get(level_name, logging.INFO))
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)
    
    # Файловый обработчик с ротацией
    file_handler = RotatingFileHandler(
        os.path.join(log_dir, f'{name}.log'),
        maxBytes=MAX_LOG_BYTES,
        backupCount=LOG_BACKUPS,
        encoding="utf-8"
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)
    
    return logger
