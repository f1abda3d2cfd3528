from __future__ import annotations
from typing import Dict, Iterable, List, Optional

from kanban_board.domain.task_models import Task, TaskCreate, TaskUpdate, TaskStatus, new_task_id
from kanban_board.infra.memory.rwlock import ReadWriteLock


SEED_TASKS = (
    TaskCreate(title="Set up the project board", description="Columns, first cards, shared link", status=TaskStatus.done),
    TaskCreate(title="Draft the task API", description="List, create, update and delete over JSON", status=TaskStatus.in_progress),
    TaskCreate(title="Write the board UI", status=TaskStatus.todo),
)


class InMemoryTaskStore:
    """
    Process-lifetime task store guarded by a reader/writer lock.

    Stored Task objects never leave this class: every read and write hands
    back a copy, so callers can't mutate the board behind the lock.
    """
    def __init__(self):
        self._tasks: Dict[str, Task] = {}
        self._lock = ReadWriteLock()

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._tasks)

    def create(self, data: TaskCreate) -> Task:
        task = Task(
            id=new_task_id(),
            title=data.title,
            description=data.description or None,
            status=data.status,
        )
        with self._lock.write_locked():
            self._tasks[task.id] = task
        return task.model_copy()

    def get(self, task_id: str) -> Optional[Task]:
        with self._lock.read_locked():
            task = self._tasks.get(task_id)
            return task.model_copy() if task else None

    def list(self) -> List[Task]:
        with self._lock.read_locked():
            return [t.model_copy() for t in self._tasks.values()]

    def update(self, task_id: str, data: TaskUpdate) -> Optional[Task]:
        changes = data.changes()
        with self._lock.write_locked():
            task = self._tasks.get(task_id)
            if task is None:
                return None
            # swap in a new object; readers holding the old copy see it whole
            merged = task.model_copy(update=changes)
            self._tasks[task_id] = merged
            return merged.model_copy()

    def delete(self, task_id: str) -> bool:
        with self._lock.write_locked():
            return self._tasks.pop(task_id, None) is not None

    def seed(self, tasks: Iterable[TaskCreate] = SEED_TASKS) -> List[Task]:
        return [self.create(t) for t in tasks]

    def clear(self) -> None:
        with self._lock.write_locked():
            self._tasks.clear()
