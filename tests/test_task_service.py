from kanban_board.domain.task_models import TaskCreate, TaskStatus, TaskUpdate
from kanban_board.services.task_service import TaskService


def test_service_delegates_to_store(store):
    svc = TaskService(store)
    task = svc.create_task(TaskCreate(title="A"))
    assert svc.get_task(task.id) == task
    assert svc.list_tasks() == [task]
    assert svc.count() == 1

    updated = svc.update_task(task.id, TaskUpdate(status=TaskStatus.done))
    assert updated.status == TaskStatus.done

    assert svc.delete_task(task.id) is True
    assert svc.count() == 0


def test_service_reports_missing_ids(store):
    svc = TaskService(store)
    assert svc.get_task("missing") is None
    assert svc.update_task("missing", TaskUpdate(title="x")) is None
    assert svc.delete_task("missing") is False
