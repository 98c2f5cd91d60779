"""
Настройки из переменных окружения.
"""
import os

# Имя логгера и директория для логов
LOGGER_NAME = os.getenv("CHESS_LOGGER_NAME", "chess_board")
LOG_DIR = os.getenv("CHESS_LOG_DIR", "logs")

# Уровень консольного обработчика (файл всегда пишет DEBUG)
LOG_LEVEL = os.getenv("CHESS_LOG_LEVEL", "INFO").upper()
