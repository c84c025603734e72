# gradebook/io_utils.py
"""Модуль для разбора консольного ввода и форматирования вывода по ростеру."""
from typing import List, Dict, Any

from .models import Student
from .errors import GradeParseError

def parse_grade(raw: str) -> float:
    """Разбирает одну оценку из строки. Диапазон здесь не проверяется."""
    text = raw.strip()
    if text.endswith('%'):
        text = text[:-1].rstrip()
    try:
        return float(text)
    except ValueError:
        raise GradeParseError(f"'{raw.strip()}' не является числом.")

def parse_grades(raw: str) -> List[float]:
    """Разбирает оценки, записанные через пробел."""
    return [parse_grade(token) for token in raw.split()]

def format_roster_report(students: List[Student]) -> str:
    """Собирает отчёты всех студентов, разделяя их пустой строкой."""
    if not students:
        return "Список студентов пуст."
    return "\n\n".join(s.report() for s in students)

def format_statistics(stats: Dict[str, Any]) -> str:
    """Формирует текстовый блок статистики по группе."""
    lines = [
        f"Всего студентов: {stats['total_students']}",
        f"С оценками: {stats['graded_students']}",
    ]
    if stats['overall_average'] is None:
        lines.append("Общий средний балл: нет оценок")
        return "\n".join(lines)

    best, worst = stats['best_student'], stats['worst_student']
    lines.append(f"Общий средний балл: {stats['overall_average']:.2f}")
    lines.append(f"Лучший студент: {best.name} (ср. балл: {best.average:.2f})")
    lines.append(f"Худший студент: {worst.name} (ср. балл: {worst.average:.2f})")
    distribution = ", ".join(
        f"{letter}: {count}" for letter, count in sorted(stats['letter_distribution'].items())
    )
    lines.append(f"Распределение букв: {distribution}")
    return "\n".join(lines)
