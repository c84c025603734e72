# gradebook/processing.py
"""Модуль для работы с ростером: добавление студентов, оценки, сортировка, статистика."""
import logging
from collections import Counter
from numbers import Real
from typing import List, Dict, Any, Optional

from .models import Student
from .errors import StudentNotFoundError, DuplicateStudentError, ValidationError

logger = logging.getLogger(__name__)


def add_student(students: List[Student], name: str) -> Student:
    """Создаёт студента и добавляет его в ростер, проверяя уникальность имени."""
    if any(s.name == name for s in students):
        raise DuplicateStudentError(f"Студент с именем '{name}' уже существует.")

    new_student = Student(name)
    students.append(new_student)
    logger.info("Добавлен студент %s", name)
    return new_student

def find_student(students: List[Student], name: str) -> Student:
    """Ищет студента по имени."""
    student = next((s for s in students if s.name == name), None)
    if student is None:
        raise StudentNotFoundError(f"Студент '{name}' не найден.")
    return student

def record_grade(students: List[Student], name: str, score: Real) -> Student:
    """Добавляет оценку существующему студенту."""
    student = find_student(students, name)
    try:
        student.add_grade(score)
    except ValidationError as e:
        logger.warning("Оценка отклонена для %s: %s", name, e)
        raise
    logger.debug("Студенту %s добавлена оценка %s", name, score)
    return student

def _avg_sort_key(s: Student):
    # Студенты без оценок идут в конец, внутри групп - по имени
    if s.average is None:
        return (1, 0.0, s.name)
    return (0, -s.average, s.name)

def sort_students(students: List[Student], by: str) -> List[Student]:
    """Сортирует список студентов по заданному критерию."""
    if by == 'added':
        return list(students)
    elif by == 'name':
        return sorted(students, key=lambda s: s.name)
    elif by == 'avg':
        return sorted(students, key=_avg_sort_key)
    else:
        raise ValueError("Неверный ключ для сортировки. Доступно: 'added', 'name', 'avg'.")

def get_group_statistics(students: List[Student]) -> Optional[Dict[str, Any]]:
    """Рассчитывает статистику по группе студентов."""
    if not students:
        return None

    graded = [s for s in students if s.average is not None]
    all_grades = [grade for s in students for grade in s.grades]

    overall_avg = sum(all_grades) / len(all_grades) if all_grades else None

    return {
        "total_students": len(students),
        "graded_students": len(graded),
        "overall_average": overall_avg,
        "best_student": max(graded, key=lambda s: s.average) if graded else None,
        "worst_student": min(graded, key=lambda s: s.average) if graded else None,
        "letter_distribution": dict(Counter(s.letter_grade for s in graded)),
    }

def get_top_n_students(students: List[Student], n: int) -> List[Student]:
    """Возвращает N лучших студентов по среднему баллу (только с оценками)."""
    if n < 0:
        raise ValueError("N не может быть отрицательным.")
    graded = [s for s in sort_students(students, 'avg') if s.average is not None]
    return graded[:n]
