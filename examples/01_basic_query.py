"""
Example 01: Basic Query Execution

This example demonstrates scalar queries and updates using LiteQuery's Session.
"""

import sqlite3
import tempfile
from pathlib import Path

from lite_query import ConnectionConfig, Session, SqlType


def main():
    # Create a temporary database
    db_file = tempfile.NamedTemporaryFile(delete=False, suffix=".db")
    db_path = db_file.name
    db_file.close()

    # Set up the database with some test data
    conn = sqlite3.connect(db_path)
    conn.execute("""
        CREATE TABLE users (
            id INTEGER PRIMARY KEY,
            name TEXT NOT NULL,
            email TEXT NOT NULL,
            active INTEGER DEFAULT 1,
            created TEXT
        )
    """)
    conn.execute("INSERT INTO users (name, email, created) VALUES ('Alice', 'alice@example.com', '2024-01-15')")
    conn.execute("INSERT INTO users (name, email, created) VALUES ('Bob', 'bob@example.com', '2024-02-01')")
    conn.execute("INSERT INTO users (name, email, active) VALUES ('Charlie', 'charlie@example.com', 0)")
    conn.commit()
    conn.close()

    session = Session.from_config(ConnectionConfig(driver="sqlite", database=db_path))

    print("=== Basic Query Execution ===\n")

    # find_string: first column of the first row
    name = session.find_string("SELECT name FROM users WHERE id = ?", [1], [SqlType.INTEGER])
    print(f"find_string result: {name}\n")

    # find_string_list: first column of every row
    names = session.find_string_list("SELECT name FROM users WHERE active = ?", [1], [SqlType.INTEGER])
    print(f"find_string_list result: {names}\n")

    # find_integer: a single value
    count = session.find_integer("SELECT COUNT(*) FROM users")
    print(f"find_integer result: {count} total users\n")

    # find_date_list: NULLs are kept as None
    created = session.find_date_list("SELECT created FROM users ORDER BY id")
    print(f"find_date_list result: {created}\n")

    # execute_update: affected row count
    updated = session.execute_update(
        "UPDATE users SET active = ? WHERE name = ?",
        [1, "Charlie"],
        [SqlType.INTEGER, SqlType.VARCHAR],
    )
    print(f"execute_update result: {updated} row(s) updated\n")

    # Clean up
    Path(db_path).unlink()


if __name__ == "__main__":
    main()
