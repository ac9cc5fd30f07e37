"""
Example 02: Model Mapping

This example demonstrates mapping query results onto dataclasses, Pydantic
models and plain classes with property accessors.
"""

import sqlite3
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel

from lite_query import Column, ConnectionConfig, Session, SqlType, Transient


@dataclass
class UserDataclass:
    """User model using dataclass"""
    id: int = 0
    name: Annotated[str, Column("full_name")] = ""
    email: str = ""
    active: bool = True
    display: Annotated[str, Transient()] = ""


class UserPydantic(BaseModel):
    """User model using Pydantic"""
    id: int = 0
    name: Annotated[str, Column("full_name")] = ""
    email: str = ""


class UserPlain:
    """User model with a property whose setter names its column"""
    id: int
    email: str

    def __init__(self):
        self.id = 0
        self._email = ""

    @property
    def email(self):
        return self._email

    @email.setter
    @Column("email")
    def email(self, value):
        self._email = value.lower()


def main():
    # Set up database
    db_file = tempfile.NamedTemporaryFile(delete=False, suffix=".db")
    db_path = db_file.name
    db_file.close()

    conn = sqlite3.connect(db_path)
    conn.execute("""
        CREATE TABLE users (
            id INTEGER PRIMARY KEY,
            full_name TEXT NOT NULL,
            email TEXT NOT NULL,
            active INTEGER DEFAULT 1
        )
    """)
    conn.execute("INSERT INTO users (full_name, email) VALUES ('Alice', 'Alice@Example.com')")
    conn.execute("INSERT INTO users (full_name, email) VALUES ('Bob', 'bob@example.com')")
    conn.commit()
    conn.close()

    session = Session.from_config(ConnectionConfig(driver="sqlite", database=db_path))

    print("=== Model Mapping ===\n")

    # Dataclass mapping; the transient field is left alone
    users = session.find_list_using_reflection("SELECT * FROM users ORDER BY id", None, None, UserDataclass)
    print("Dataclass mapping:")
    for user in users:
        print(f"  - {user}")
    print()

    # Pydantic mapping of a single row
    user = session.find_object_using_reflection(
        "SELECT id, full_name, email FROM users WHERE id = ?", [2], [SqlType.INTEGER], UserPydantic
    )
    print(f"Pydantic mapping: {user}\n")

    # Plain class; the setter lower-cases the address
    plain = session.find_object_using_reflection("SELECT id, email FROM users WHERE id = 1", None, None, UserPlain)
    print(f"Plain class mapping: id={plain.id} email={plain.email}\n")

    # Clean up
    Path(db_path).unlink()


if __name__ == "__main__":
    main()
