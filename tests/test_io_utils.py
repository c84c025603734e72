# tests/test_io_utils.py
import pytest
from gradebook.io_utils import parse_grade, parse_grades, format_roster_report, format_statistics
from gradebook.processing import get_group_statistics
from gradebook.errors import GradeParseError

@pytest.mark.parametrize("raw, expected", [
    ("85", 85.0),
    ("  92.5\n", 92.5),
    ("77%", 77.0),
    ("-3", -3.0),
    ("150", 150.0),
])
def test_parse_grade(raw, expected):
    assert parse_grade(raw) == expected

@pytest.mark.parametrize("raw", ["", "abc", "8 5", "%"])
def test_parse_grade_not_a_number(raw):
    with pytest.raises(GradeParseError):
        parse_grade(raw)

def test_parse_grades():
    assert parse_grades("85 92  70.5") == [85.0, 92.0, 70.5]
    assert parse_grades("   ") == []
    with pytest.raises(GradeParseError):
        parse_grades("85 x")

def test_format_roster_report(sample_students):
    text = format_roster_report(sample_students)
    blocks = text.split("\n\n")
    assert len(blocks) == 4
    assert blocks[0] == sample_students[0].report()
    assert "No grades yet" in blocks[3]

def test_format_roster_report_empty():
    assert format_roster_report([]) == "Список студентов пуст."

def test_format_statistics(sample_students):
    text = format_statistics(get_group_statistics(sample_students))
    assert "Всего студентов: 4" in text
    assert "Общий средний балл: 82.88" in text
    assert "Лучший студент: Петров Петр (ср. балл: 91.67)" in text
    assert "A: 1, B: 1, D: 1" in text
