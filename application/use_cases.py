import logging
from starlette.concurrency import run_in_threadpool
from typing import Dict, List, Optional
from domain.entities import Task
from domain.errors import ConfigError
from application.ports import DescriptionProvider, TaskRepository

logger = logging.getLogger(__name__)

ANTHROPIC = "anthropic"
OLLAMA = "ollama"
GEMINI = "gemini"

class TaskUseCases:
    def __init__(self, db: TaskRepository, providers: Dict[str, DescriptionProvider]):
        self.db = db
        self.providers = providers

    def _provider(self, name: str) -> DescriptionProvider:
        provider = self.providers.get(name)
        if provider is None:
            raise ConfigError(f"Description provider '{name}' is not configured")
        return provider

    async def create_task(self, title: str, description: Optional[str] = None) -> Task:
        """Stores a task, asking the default provider for a description when none is given."""
        if not description:
            description = await self._provider(ANTHROPIC).generate(title)
        return await run_in_threadpool(self.db.create_task, title, description)

    async def create_task_with(self, provider_name: str, title: str) -> Task:
        description = await self._provider(provider_name).generate(title)
        logger.info(f"Generated description via {provider_name} ({len(description)} chars)")
        return await run_in_threadpool(self.db.create_task, title, description)

    def get_task(self, task_id: int) -> Task:
        return self.db.get_task(task_id)

    def get_all_tasks(self) -> List[Task]:
        return self.db.list_tasks()

    def update_task(self, task_id: int, title: str, description: str) -> None:
        self.db.update_task(task_id, title, description)

    def delete_task(self, task_id: int) -> None:
        self.db.delete_task(task_id)
