import sqlite3
import logging
from typing import List
from domain.entities import Task
from domain.errors import NotFoundError, StorageError

logger = logging.getLogger(__name__)

# SQLite INTEGER is a signed 64-bit value; ids outside it can never match a row.
SQLITE_MIN_INTEGER = -2**63
SQLITE_MAX_INTEGER = 2**63 - 1

def _storable_id(task_id: int) -> bool:
    return SQLITE_MIN_INTEGER <= task_id <= SQLITE_MAX_INTEGER

class Database:
    def __init__(self, db_name: str = "tasks.db"):
        self.db_name = db_name
        self._init_db()

    def _init_db(self):
        try:
            with sqlite3.connect(self.db_name) as conn:
                cursor = conn.cursor()
                cursor.execute("""
                    CREATE TABLE IF NOT EXISTS tasks (
                        id INTEGER PRIMARY KEY AUTOINCREMENT,
                        title TEXT,
                        description TEXT
                    )
                """)
                conn.commit()
        except sqlite3.Error as e:
            raise StorageError(str(e)) from e
        logger.info(f"Task table ready in {self.db_name}")

    @staticmethod
    def _row_to_task(row) -> Task:
        return Task(id=row[0], title=row[1] or "", description=row[2] or "")

    def create_task(self, title: str, description: str) -> Task:
        try:
            with sqlite3.connect(self.db_name) as conn:
                cursor = conn.cursor()
                cursor.execute(
                    "INSERT INTO tasks (title, description) VALUES (?, ?)",
                    (title, description)
                )
                conn.commit()
                return Task(id=cursor.lastrowid, title=title, description=description)
        except sqlite3.Error as e:
            logger.error(f"Failed to insert task: {e}")
            raise StorageError(str(e)) from e

    def get_task(self, task_id: int) -> Task:
        if not _storable_id(task_id):
            raise NotFoundError("Task not found")
        try:
            with sqlite3.connect(self.db_name) as conn:
                cursor = conn.cursor()
                cursor.execute(
                    "SELECT id, title, description FROM tasks WHERE id = ?",
                    (task_id,)
                )
                row = cursor.fetchone()
        except sqlite3.Error as e:
            logger.error(f"Failed to read task {task_id}: {e}")
            raise StorageError(str(e)) from e
        if row is None:
            raise NotFoundError("Task not found")
        return self._row_to_task(row)

    def list_tasks(self) -> List[Task]:
        try:
            with sqlite3.connect(self.db_name) as conn:
                cursor = conn.cursor()
                cursor.execute("SELECT id, title, description FROM tasks ORDER BY id")
                rows = cursor.fetchall()
        except sqlite3.Error as e:
            logger.error(f"Failed to list tasks: {e}")
            raise StorageError(str(e)) from e
        return [self._row_to_task(row) for row in rows]

    def update_task(self, task_id: int, title: str, description: str) -> None:
        # No existence check: updating a missing id is a no-op.
        if not _storable_id(task_id):
            return
        try:
            with sqlite3.connect(self.db_name) as conn:
                cursor = conn.cursor()
                cursor.execute(
                    "UPDATE tasks SET title = ?, description = ? WHERE id = ?",
                    (title, description, task_id)
                )
                conn.commit()
                if cursor.rowcount == 0:
                    logger.debug(f"Update matched no rows for task {task_id}")
        except sqlite3.Error as e:
            logger.error(f"Failed to update task {task_id}: {e}")
            raise StorageError(str(e)) from e

    def delete_task(self, task_id: int) -> None:
        if not _storable_id(task_id):
            return
        try:
            with sqlite3.connect(self.db_name) as conn:
                cursor = conn.cursor()
                cursor.execute("DELETE FROM tasks WHERE id = ?", (task_id,))
                conn.commit()
                if cursor.rowcount == 0:
                    logger.debug(f"Delete matched no rows for task {task_id}")
        except sqlite3.Error as e:
            logger.error(f"Failed to delete task {task_id}: {e}")
            raise StorageError(str(e)) from e
