from typing import List, Protocol
from domain.entities import Task


class DescriptionProvider(Protocol):
    async def generate(self, title: str) -> str:
        ...


class TaskRepository(Protocol):
    def list_tasks(self) -> List[Task]: ...
    def get_task(self, task_id: int) -> Task: ...
    def create_task(self, title: str, description: str) -> Task: ...
    def update_task(self, task_id: int, title: str, description: str) -> None: ...
    def delete_task(self, task_id: int) -> None: ...
