"""A small SQLite student register with an optional city lookup table."""

from __future__ import annotations

import sqlite3
import sys
from contextlib import closing
from dataclasses import dataclass

STUDENT_TABLE = "student"
CITY_TABLE = "city"

STUDENTS: tuple[tuple[str, int, int], ...] = (
    ("Tom", 20, 1),
    ("Jack", 23, 2),
    ("Jane", 22, 3),
    ("Jerry", 25, 7),
)
"""Name, age and city id of each student in the initial table."""

CITIES: tuple[str, ...] = (
    "Beijing",
    "Shanghai",
    "Nanjing",
    "Tianjin",
    "Wuhan",
    "Hangzhou",
    "Suzhou",
    "Guangzhou",
)


@dataclass(frozen=True)
class Student:
    name: str
    age: int
    id: int | None = None
    city: str | None = None


def _check_identifier(name: str) -> None:
    if not name.isidentifier():
        raise ValueError(f"invalid table name: {name!r}")


def connect(db_name: str) -> sqlite3.Connection:
    """Open (creating if needed) the database file; sqlite3.Error on failure."""
    return sqlite3.connect(db_name)


def table_exists(connection: sqlite3.Connection, table_name: str) -> bool:
    (count,) = connection.execute(
        "SELECT count(*) FROM sqlite_master WHERE type='table' AND name=?",
        (table_name,),
    ).fetchone()
    return count != 0


def create_students(connection: sqlite3.Connection, table_name: str = STUDENT_TABLE) -> bool:
    """Create and fill the student table; False if it already exists."""
    _check_identifier(table_name)
    if table_exists(connection, table_name):
        return False
    with connection:
        connection.execute(
            f"CREATE TABLE {table_name} ("
            "id INTEGER PRIMARY KEY AUTOINCREMENT,"
            "name VARCHAR,"
            "age INT,"
            "address INTEGER)"
        )
        connection.executemany(
            f"INSERT INTO {table_name} (name, age, address) VALUES (?, ?, ?)",
            STUDENTS,
        )
    return True


def _students(rows) -> list[Student]:
    return [Student(name=name, age=age, id=row_id) for row_id, name, age in rows]


def list_students(connection: sqlite3.Connection) -> list[Student]:
    """All students in insertion order."""
    return _students(connection.execute(f"SELECT id, name, age FROM {STUDENT_TABLE} ORDER BY id"))


def students_between(connection: sqlite3.Connection, low: int = 20, high: int = 25) -> list[Student]:
    """Students strictly older than low and strictly younger than high."""
    return _students(
        connection.execute(
            f"SELECT id, name, age FROM {STUDENT_TABLE} WHERE age > ? AND age < ? ORDER BY id",
            (low, high),
        )
    )


def students_sorted_by_name(connection: sqlite3.Connection) -> list[Student]:
    return _students(connection.execute(f"SELECT id, name, age FROM {STUDENT_TABLE} ORDER BY name ASC, id"))


def create_cities(connection: sqlite3.Connection) -> bool:
    """Turn on foreign keys and create and fill the city table; False if it exists."""
    connection.execute("PRAGMA foreign_keys = ON")
    if table_exists(connection, CITY_TABLE):
        return False
    with connection:
        connection.execute(f"CREATE TABLE {CITY_TABLE} (id INTEGER PRIMARY KEY AUTOINCREMENT, name VARCHAR)")
        connection.executemany(f"INSERT INTO {CITY_TABLE} (name) VALUES (?)", [(name,) for name in CITIES])
    return True


def students_with_city(connection: sqlite3.Connection) -> list[Student]:
    """Students whose address matches a city, with the city name resolved."""
    rows = connection.execute(
        f"SELECT s.id, s.name, s.age, c.name FROM {STUDENT_TABLE} AS s "
        f"JOIN {CITY_TABLE} AS c ON s.address = c.id ORDER BY s.id"
    )
    return [Student(name=name, age=age, id=row_id, city=city) for row_id, name, age, city in rows]


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    db_name = args[0] if args else "demo.db"
    try:
        with closing(connect(db_name)) as connection:
            if table_exists(connection, STUDENT_TABLE):
                print(f"Table {STUDENT_TABLE} exists")
            else:
                print(f"Table {STUDENT_TABLE} doesn't exist")
                create_students(connection, STUDENT_TABLE)
                print(f"Create table {STUDENT_TABLE}")
            for student in list_students(connection):
                print(f"{student.name}: {student.age}")
    except sqlite3.Error as exc:
        print(f"Database Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())