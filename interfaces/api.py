# interfaces/api.py
from fastapi import APIRouter, Depends, Request, status
from schemas.task import TaskCreate, TaskGenerate, TaskUpdate, TaskResponse, MessageResponse
from application.use_cases import TaskUseCases, OLLAMA, GEMINI
from domain.entities import Task
from typing import List
import logging

logger = logging.getLogger(__name__)

router = APIRouter()

def get_use_cases(request: Request) -> TaskUseCases:
    return request.app.state.use_cases

def to_response(task: Task) -> TaskResponse:
    return TaskResponse(id=task.id, title=task.title, description=task.description)

@router.get("/tasks", response_model=List[TaskResponse])
def get_all_tasks(use_cases: TaskUseCases = Depends(get_use_cases)):
    return [to_response(task) for task in use_cases.get_all_tasks()]

@router.get("/tasks/{task_id}", response_model=TaskResponse)
def get_task(task_id: int, use_cases: TaskUseCases = Depends(get_use_cases)):
    return to_response(use_cases.get_task(task_id))

@router.post("/tasks", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
async def create_task(task: TaskCreate, use_cases: TaskUseCases = Depends(get_use_cases)):
    """Creates a task; the description is generated when the body has none."""
    created_task = await use_cases.create_task(task.title, task.description)
    logger.info(f"Created task {created_task.id}")
    return to_response(created_task)

@router.post("/tasks/ollama", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
async def create_task_ollama(task: TaskGenerate, use_cases: TaskUseCases = Depends(get_use_cases)):
    created_task = await use_cases.create_task_with(OLLAMA, task.title)
    logger.info(f"Created task {created_task.id} with Ollama description")
    return to_response(created_task)

@router.post("/tasks/gemini", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
async def create_task_gemini(task: TaskGenerate, use_cases: TaskUseCases = Depends(get_use_cases)):
    created_task = await use_cases.create_task_with(GEMINI, task.title)
    logger.info(f"Created task {created_task.id} with Gemini description")
    return to_response(created_task)

@router.put("/tasks/{task_id}", response_model=MessageResponse)
def update_task(task_id: int, task: TaskUpdate, use_cases: TaskUseCases = Depends(get_use_cases)):
    use_cases.update_task(task_id, task.title, task.description)
    return MessageResponse(message="Task updated")

@router.delete("/tasks/{task_id}", response_model=MessageResponse)
def delete_task(task_id: int, use_cases: TaskUseCases = Depends(get_use_cases)):
    use_cases.delete_task(task_id)
    return MessageResponse(message="Task deleted")
