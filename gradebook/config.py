# gradebook/config.py
"""Константы приложения: границы оценок, шкала букв, настройки логирования."""
import logging
import os

# --- ДИАПАЗОН ОЦЕНОК ---
MIN_GRADE = 0.0
MAX_GRADE = 100.0

# Порядок важен: проверка идёт сверху вниз, побеждает первая подходящая полоса.
GRADE_BANDS = (
    (90.0, 'A'),
    (80.0, 'B'),
    (70.0, 'C'),
    (60.0, 'D'),
)
FAILING_LETTER = 'F'

# --- ОТЧЁТ ---
NO_GRADES_PLACEHOLDER = "No grades yet"
NO_LETTER_PLACEHOLDER = "N/A"

# --- ЛОГИРОВАНИЕ ---
DEFAULT_LOG_LEVEL = logging.WARNING
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

def resolve_log_level(name: str) -> int:
    """Переводит имя уровня в число. Неизвестное имя заменяется на WARNING."""
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else DEFAULT_LOG_LEVEL

LOG_LEVEL = resolve_log_level(os.environ.get("GRADEBOOK_LOG_LEVEL", "WARNING"))
