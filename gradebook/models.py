# gradebook/models.py
"""Модуль, определяющий основную модель данных Student и шкалу буквенных оценок."""
from numbers import Real
from typing import List, Optional

from .config import (
    FAILING_LETTER,
    GRADE_BANDS,
    MAX_GRADE,
    MIN_GRADE,
    NO_GRADES_PLACEHOLDER,
    NO_LETTER_PLACEHOLDER,
)
from .errors import ValidationError


def letter_grade_for(average: float) -> str:
    """Переводит средний балл в букву. Первая подходящая полоса побеждает."""
    for threshold, letter in GRADE_BANDS:
        if average >= threshold:
            return letter
    return FAILING_LETTER


class Student:
    """Представляет студента: имя, история оценок и производная буквенная оценка."""
    def __init__(self, name: str):
        self._name = name
        self._grades: List[float] = []
        self._letter_grade: Optional[str] = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def grades(self) -> List[float]:
        """Копия истории оценок в порядке добавления."""
        return list(self._grades)

    @property
    def letter_grade(self) -> Optional[str]:
        return self._letter_grade

    @property
    def average(self) -> Optional[float]:
        """Средний балл студента. Возвращает None, если оценок нет."""
        if not self._grades:
            return None
        return sum(self._grades) / len(self._grades)

    def add_grade(self, score: Real) -> None:
        """Добавляет оценку в конец истории и пересчитывает букву.

        При ошибке выбрасывается ValidationError, запись студента не меняется.
        """
        if isinstance(score, bool) or not isinstance(score, Real):
            raise ValidationError(f"Оценка '{score}' должна быть числом.")
        # Цепочка сравнений ложна и для NaN, поэтому он тоже отсекается здесь.
        if not (MIN_GRADE <= score <= MAX_GRADE):
            raise ValidationError(
                f"Оценка {score} вне диапазона. Разрешен диапазон {MIN_GRADE:g}-{MAX_GRADE:g}."
            )

        self._grades.append(float(score))
        self._recalculate_letter_grade()

    def _recalculate_letter_grade(self) -> None:
        average = self.average
        self._letter_grade = None if average is None else letter_grade_for(average)

    def report(self) -> str:
        """Формирует многострочный отчёт по студенту. Ничего не выводит."""
        average = self.average
        average_str = NO_GRADES_PLACEHOLDER if average is None else f"{average:.2f}"
        letter_str = self._letter_grade or NO_LETTER_PLACEHOLDER
        return (
            f"Student: {self._name}\n"
            f"Grades: {self._grades}\n"
            f"Average: {average_str}\n"
            f"Letter Grade: {letter_str}"
        )

    def __repr__(self) -> str:
        """Возвращает строковое представление объекта для отладки."""
        return f"Student(name='{self._name}', grades={self._grades}, letter_grade={self._letter_grade!r})"

    def __str__(self) -> str:
        return self.report()
