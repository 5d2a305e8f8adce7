# app/backend/db/schema.py
"""
Database schema and first-run seed data.

`initialize_database` is idempotent: tables are created if missing, the
default administrator only if its username is free, and sample rows only
into empty tables.
"""
import logging

import asyncpg

from ..services.auth_service import PWD_CTX

logger = logging.getLogger(__name__)

DEFAULT_ADMIN_USERNAME = "admin"
DEFAULT_ADMIN_PASSWORD = "admin"

SCHEMA_STATEMENTS = [
    'CREATE EXTENSION IF NOT EXISTS "pgcrypto";',
    """
    CREATE TABLE IF NOT EXISTS administrators (
        id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
        username TEXT NOT NULL UNIQUE,
        password_hash TEXT NOT NULL,
        created_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
    );
    """,
    """
    CREATE TABLE IF NOT EXISTS students (
        id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
        student_number TEXT NOT NULL UNIQUE,
        name TEXT NOT NULL,
        gender TEXT,
        age INT CHECK (age BETWEEN 0 AND 120),
        major TEXT,
        class_name TEXT,
        contact TEXT,
        notes TEXT,
        created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
        updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
    );
    """,
    """
    CREATE TABLE IF NOT EXISTS courses (
        id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
        course_code TEXT NOT NULL UNIQUE,
        name TEXT NOT NULL,
        credit_hours INT CHECK (credit_hours BETWEEN 0 AND 20),
        teacher TEXT,
        description TEXT,
        created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
        updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
    );
    """,
    """
    CREATE TABLE IF NOT EXISTS teachers (
        id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
        teacher_code TEXT NOT NULL UNIQUE,
        name TEXT NOT NULL,
        title TEXT,
        email TEXT,
        phone TEXT,
        department TEXT,
        created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
        updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
    );
    """,
]

SAMPLE_STUDENTS = [
    ("2023001", "张伟", "男", 20, "计算机科学", "计科2301", "13800001111", "热爱编程"),
    ("2023002", "李娜", "女", 19, "软件工程", "软工2302", "13900002222", "学生会成员"),
    ("2023003", "王强", "男", 21, "信息管理", "信管2301", "13700003333", "喜欢篮球"),
]

SAMPLE_COURSES = [
    ("CS101", "程序设计基础", 4, "赵老师", "C 语言的基础语法与程序设计思维"),
    ("CS205", "数据结构", 3, "钱老师", "线性表、树与图的结构与算法"),
    ("CS310", "Web 开发", 3, "孙老师", "前端与后端的综合实践课程"),
]

SAMPLE_TEACHERS = [
    ("T001", "赵老师", "教授", "zhao@example.com", "13600004444", "计算机学院"),
    ("T002", "钱老师", "副教授", "qian@example.com", "13500005555", "软件学院"),
    ("T003", "孙老师", "讲师", "sun@example.com", "13400006666", "信息学院"),
]


async def create_tables(connection: asyncpg.Connection):
    for statement in SCHEMA_STATEMENTS:
        await connection.execute(statement)
    logger.info("Tables ensured.")


async def seed_default_admin(connection: asyncpg.Connection) -> bool:
    """Creates admin/admin unless that username exists. Returns True if created."""
    status = await connection.execute(
        """
        INSERT INTO administrators (username, password_hash)
        VALUES ($1, $2)
        ON CONFLICT (username) DO NOTHING;
        """,
        DEFAULT_ADMIN_USERNAME,
        PWD_CTX.hash(DEFAULT_ADMIN_PASSWORD),
    )
    created = status.split()[-1] != "0"
    if created:
        logger.info(f"Default administrator account created ({DEFAULT_ADMIN_USERNAME}/{DEFAULT_ADMIN_PASSWORD}).")
    else:
        logger.info("Default administrator already exists.")
    return created


async def _seed_if_empty(connection: asyncpg.Connection, table: str, columns: str, rows) -> bool:
    count = await connection.fetchval(f"SELECT COUNT(*)::int FROM {table};")
    if count:
        logger.info(f"{table} already has data, skipping seed.")
        return False
    placeholders = ", ".join(f"${i}" for i in range(1, len(rows[0]) + 1))
    await connection.executemany(
        f"INSERT INTO {table} ({columns}) VALUES ({placeholders});",
        rows,
    )
    logger.info(f"Seeded {len(rows)} sample rows into {table}.")
    return True


async def seed_sample_data(connection: asyncpg.Connection):
    await _seed_if_empty(
        connection, "students",
        "student_number, name, gender, age, major, class_name, contact, notes",
        SAMPLE_STUDENTS,
    )
    await _seed_if_empty(
        connection, "courses",
        "course_code, name, credit_hours, teacher, description",
        SAMPLE_COURSES,
    )
    await _seed_if_empty(
        connection, "teachers",
        "teacher_code, name, title, email, phone, department",
        SAMPLE_TEACHERS,
    )


async def initialize_database(dsn: str, ssl=None):
    connection = await asyncpg.connect(dsn=dsn, ssl=ssl)
    try:
        await create_tables(connection)
        await seed_default_admin(connection)
        await seed_sample_data(connection)
    finally:
        await connection.close()
    logger.info("Database initialisation completed successfully.")
