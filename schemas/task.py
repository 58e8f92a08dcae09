from typing import Optional
from pydantic import BaseModel


class TaskCreate(BaseModel):
    title: str
    description: Optional[str] = None


class TaskGenerate(BaseModel):
    title: str


class TaskUpdate(BaseModel):
    title: str
    description: str = ""


class TaskResponse(BaseModel):
    id: int
    title: str
    description: str


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str
