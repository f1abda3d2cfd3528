from __future__ import annotations
from pydantic import BaseModel, field_validator
from enum import Enum
from typing import Optional
import uuid


class TaskStatus(str, Enum):
    todo = "A Fazer"
    in_progress = "Em Progresso"
    done = "Concluídas"


def _require_title(value: Optional[str]) -> str:
    if value is None or not value.strip():
        raise ValueError("title must not be empty")
    return value


class TaskCreate(BaseModel):
    title: str
    description: Optional[str] = None
    status: TaskStatus = TaskStatus.todo

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, v: str) -> str:
        return _require_title(v)

    @field_validator("status", mode="before")
    @classmethod
    def _default_status(cls, v):
        # absent, null and "" all mean a fresh task
        if v is None or v == "":
            return TaskStatus.todo
        return v


class TaskUpdate(BaseModel):
    """
    Partial update. Only fields the client actually sent are applied;
    presence is read from `model_fields_set`, never inferred from None.
    """
    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[TaskStatus] = None

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, v: Optional[str]) -> str:
        return _require_title(v)

    @field_validator("status", mode="before")
    @classmethod
    def _status_present(cls, v):
        if v is None or v == "":
            raise ValueError("status must be one of: " + ", ".join(s.value for s in TaskStatus))
        return v

    def changes(self) -> dict:
        data = self.model_dump(include=self.model_fields_set)
        if "description" in data and not data["description"]:
            data["description"] = None
        return data


class Task(BaseModel):
    id: str
    title: str
    description: Optional[str] = None
    status: TaskStatus = TaskStatus.todo


def new_task_id() -> str:
    return str(uuid.uuid4())
