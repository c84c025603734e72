# gradebook/errors.py
"""Модуль для определения пользовательских исключений приложения."""

class GradeTrackerError(Exception):
    """Базовый класс для всех исключений в этом приложении."""
    pass

class ValidationError(GradeTrackerError, ValueError):
    """Оценка вне диапазона 0-100 или не является числом."""
    pass

class GradeParseError(GradeTrackerError, ValueError):
    """Введённый текст не удалось разобрать как число."""
    pass

class StudentNotFoundError(GradeTrackerError):
    """Исключение, когда студент с заданным именем не найден."""
    pass

class DuplicateStudentError(GradeTrackerError):
    """Исключение при попытке добавить студента с уже существующим именем."""
    pass
