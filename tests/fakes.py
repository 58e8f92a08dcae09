# tests/fakes.py

import asyncio
from typing import List, Optional

from domain.errors import StorageError, TaskServiceError


class FakeProvider:
    """Returns a fixed description, or raises the given error, and records titles."""

    def __init__(self, text: str = "generated", error: Optional[TaskServiceError] = None) -> None:
        self.text = text
        self.error = error
        self.titles: List[str] = []

    async def generate(self, title: str) -> str:
        self.titles.append(title)
        if self.error is not None:
            raise self.error
        return self.text


class BrokenDatabase:
    """Store whose every call fails as if the connection were gone."""

    def _fail(self, *args, **kwargs):
        raise StorageError("database is locked")

    list_tasks = _fail
    get_task = _fail
    create_task = _fail
    update_task = _fail
    delete_task = _fail


class LoopCheckingDatabase:
    """Wraps a store and records whether each call ran on an event loop thread."""

    def __init__(self, inner) -> None:
        self.inner = inner
        self.calls_on_loop: List[str] = []

    def _record(self, name: str) -> None:
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            return
        self.calls_on_loop.append(name)

    def list_tasks(self):
        self._record("list_tasks")
        return self.inner.list_tasks()

    def get_task(self, task_id):
        self._record("get_task")
        return self.inner.get_task(task_id)

    def create_task(self, title, description):
        self._record("create_task")
        return self.inner.create_task(title, description)

    def update_task(self, task_id, title, description):
        self._record("update_task")
        return self.inner.update_task(task_id, title, description)

    def delete_task(self, task_id):
        self._record("delete_task")
        return self.inner.delete_task(task_id)
