# tests/conftest.py
import pytest
from typing import List
from gradebook.models import Student

def _student(name: str, grades: List[float]) -> Student:
    s = Student(name)
    for g in grades:
        s.add_grade(g)
    return s

@pytest.fixture
def sample_students() -> List[Student]:
    """Фикстура, предоставляющая тестовый ростер студентов."""
    return [
        _student("Иванов Иван", [78, 85, 90]),
        _student("Петров Петр", [92, 88, 95]),
        _student("Сидорова Анна", [65, 70]),
        Student("Новиков Олег"),
    ]
