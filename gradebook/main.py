# gradebook/main.py
"""Главный модуль, реализующий консольный интерфейс (CLI) для учёта оценок."""
import argparse
import logging
from typing import List, Optional

from . import io_utils, processing, errors
from .config import LOG_FORMAT, LOG_LEVEL, NO_LETTER_PLACEHOLDER
from .models import Student

DEMO_GRADES = {
    "Alice": [85.0, 92.0],
    "Bob": [75.0, 88.0],
}

def print_menu():
    """Выводит на экран главное меню."""
    print("\n" + "="*30)
    print("      УЧЁТ ОЦЕНОК")
    print("="*30)
    print("1. Добавить студента")
    print("2. Добавить оценки студенту")
    print("3. Показать отчёты по всем студентам")
    print("4. Показать статистику по группе")
    print("5. Сортировать и показать список")
    print("6. Показать ТОП-N студентов")
    print("7. Загрузить демо-данные")
    print("0. Выход")
    print("="*30)

def load_demo(students: List[Student]) -> List[Student]:
    """Добавляет в ростер демонстрационных студентов с оценками."""
    for name, grades in DEMO_GRADES.items():
        processing.add_student(students, name)
        for grade in grades:
            processing.record_grade(students, name, grade)
    return students

def run_demo() -> List[Student]:
    """Создаёт демо-ростер и печатает отчёт по каждому студенту."""
    students = load_demo([])
    for s in students:
        print("\n" + s.report())
    return students

def add_grades_interactive(students: List[Student]):
    """Запрашивает имя и оценки, добавляет корректные, сообщает об отклонённых."""
    name = input("Введите имя студента: ").strip()
    student = processing.find_student(students, name)
    grades = io_utils.parse_grades(input("Введите оценки через пробел: "))
    if not grades:
        print("ℹ️ Оценки не введены.")
        return

    added = 0
    for grade in grades:
        try:
            processing.record_grade(students, name, grade)
            added += 1
        except errors.ValidationError as e:
            print(f"❌ {e}")
    print(f"✅ Добавлено оценок: {added}. Текущая буква: {student.letter_grade or NO_LETTER_PLACEHOLDER}")

def main_cli(students: Optional[List[Student]] = None) -> List[Student]:
    """Основной цикл консольного приложения. Возвращает итоговый ростер."""
    if students is None:
        students = []

    while True:
        print_menu()
        choice = input("Выберите пункт меню: ").strip()

        try:
            if choice == '1':
                name = input("Введите имя студента: ").strip()
                if not name:
                    print("❌ Имя студента не может быть пустым.")
                    continue
                processing.add_student(students, name)
                print(f"✅ Студент {name} успешно добавлен.")

            elif choice == '2':
                add_grades_interactive(students)

            elif choice == '3':
                print("\n--- Отчёты по студентам ---")
                print(io_utils.format_roster_report(students))

            elif choice == '4':
                stats = processing.get_group_statistics(students)
                if not stats:
                    print("ℹ️ Список студентов пуст, статистика недоступна.")
                else:
                    print("\n--- Статистика по группе ---")
                    print(io_utils.format_statistics(stats))

            elif choice == '5':
                sort_key = input("Введите ключ сортировки (added, name, avg): ").strip().lower()
                sorted_list = processing.sort_students(students, sort_key)
                print(f"\n--- Студенты, отсортированные по '{sort_key}' ---")
                print(io_utils.format_roster_report(sorted_list))

            elif choice == '6':
                try:
                    n = int(input("Введите количество студентов (ТОП-N): "))
                except ValueError:
                    print("❌ Ошибка ввода: N должно быть целым числом.")
                    continue
                top = processing.get_top_n_students(students, n)
                print(f"\n--- ТОП-{n} студентов ---")
                for place, s in enumerate(top, start=1):
                    print(f"{place}. {s.name} - {s.average:.2f} ({s.letter_grade})")

            elif choice == '7':
                load_demo(students)
                print(f"✅ Демо-данные загружены. Студентов в списке: {len(students)}.")

            elif choice == '0':
                print("👋 До свидания!")
                break

            else:
                print("❌ Неверный выбор. Пожалуйста, введите число от 0 до 7.")

        except errors.GradeParseError as e:
            print(f"❌ Ошибка ввода: {e}")
        except errors.GradeTrackerError as e:
            print(f"❌ Ошибка логики: {e}")
        except ValueError as e:
            print(f"❌ Ошибка данных: {e}")

    return students

def main(argv: Optional[List[str]] = None) -> int:
    """Точка входа консольного скрипта."""
    parser = argparse.ArgumentParser(prog="gradebook", description="Учёт оценок студентов.")
    parser.add_argument("--demo", action="store_true", help="вывести демо-отчёты и выйти")
    args = parser.parse_args(argv)

    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)

    if args.demo:
        run_demo()
        return 0

    try:
        main_cli()
    except (KeyboardInterrupt, EOFError):
        print("\nПрограмма принудительно остановлена.")
    return 0

if __name__ == '__main__':
    raise SystemExit(main())
