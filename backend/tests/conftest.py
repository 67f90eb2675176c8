import os
import sys

# Add the parent directory (backend) to the Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest
import sqlite3
import tempfile
from fastapi.testclient import TestClient

from main import app
from models.schema import ColumnRow, ForeignKeyRow

@pytest.fixture(scope="session")
def client():
    with TestClient(app) as test_client:
        yield test_client

@pytest.fixture
def temp_sqlite_db():
    fd, path = tempfile.mkstemp(suffix=".db")
    try:
        conn = sqlite3.connect(path)
        cur = conn.cursor()
        cur.execute("CREATE TABLE users (id INTEGER PRIMARY KEY, name TEXT, email TEXT UNIQUE);")
        for i in range(1, 8):
            cur.execute("INSERT INTO users (name, email) VALUES (?, ?);", (f"User {i}", f"user{i}@example.com"))
        cur.execute("CREATE TABLE posts (id INTEGER PRIMARY KEY, user_id INTEGER REFERENCES users(id), title TEXT);")
        cur.execute("INSERT INTO posts (user_id, title) VALUES (1, '42');")
        conn.commit()
        conn.close()
        yield path
    finally:
        os.close(fd)
        os.remove(path)

@pytest.fixture
def sqlite_dsn(temp_sqlite_db):
    return f"sqlite:///{temp_sqlite_db}"

@pytest.fixture
def blog_column_rows():
    return [
        ColumnRow("users", "id", "int4", True),
        ColumnRow("users", "name", "text", False),
        ColumnRow("posts", "id", "int4", True),
        ColumnRow("posts", "user_id", "int4", False),
    ]

@pytest.fixture
def blog_fk_rows():
    return [ForeignKeyRow("posts", "user_id", "users", "id")]
