import logging
from typing import List, Optional
from kanban_board.domain.task_models import Task, TaskCreate, TaskUpdate

logger = logging.getLogger("kanban.tasks")

class TaskService:
    def __init__(self, store):
        self.store = store

    def create_task(self, data: TaskCreate) -> Task:
        task = self.store.create(data)
        logger.info(
            "task.create",
            extra={"category": "tasks", "event": "task.create", "task_id": task.id, "title": task.title},
        )
        return task

    def get_task(self, task_id: str) -> Optional[Task]:
        return self.store.get(task_id)

    def list_tasks(self) -> List[Task]:
        return self.store.list()

    def update_task(self, task_id: str, data: TaskUpdate) -> Optional[Task]:
        task = self.store.update(task_id, data)
        if task is None:
            logger.info("task.update.missing", extra={"category": "tasks", "event": "task.update.missing", "task_id": task_id})
            return None
        logger.info(
            "task.update",
            extra={
                "category": "tasks",
                "event": "task.update",
                "task_id": task_id,
                "fields": sorted(data.model_fields_set),
                "status": task.status.value,
            },
        )
        return task

    def delete_task(self, task_id: str) -> bool:
        deleted = self.store.delete(task_id)
        event = "task.delete" if deleted else "task.delete.missing"
        logger.info(event, extra={"category": "tasks", "event": event, "task_id": task_id})
        return deleted

    def count(self) -> int:
        return len(self.store)
