from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from kanban_board.domain.task_models import Task, TaskCreate, TaskUpdate
from kanban_board.services.task_service import TaskService

router = APIRouter(prefix="/tasks", tags=["tasks"])


def get_service(request: Request) -> TaskService:
    # Wired in main.create_app:
    # app.state.task_service = TaskService(store)
    svc = getattr(request.app.state, "task_service", None)
    if svc is None:
        raise RuntimeError("TaskService not wired")
    return svc


# "/tasks/" is the collection too: an empty id segment is no id.
@router.get("", response_model=list[Task], response_model_exclude_none=True)
@router.get("/", response_model=list[Task], response_model_exclude_none=True, include_in_schema=False)
def list_tasks(svc: TaskService = Depends(get_service)):
    return svc.list_tasks()


@router.post("", response_model=Task, response_model_exclude_none=True, status_code=status.HTTP_201_CREATED)
@router.post(
    "/",
    response_model=Task,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
def create_task(payload: TaskCreate, svc: TaskService = Depends(get_service)):
    return svc.create_task(payload)


# Ids in the path are never honoured on create; the store assigns one.
@router.post(
    "/{task_id}",
    response_model=Task,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
def create_task_ignoring_id(task_id: str, payload: TaskCreate, svc: TaskService = Depends(get_service)):
    return svc.create_task(payload)


@router.get("/{task_id}", response_model=Task, response_model_exclude_none=True)
def get_task(task_id: str, svc: TaskService = Depends(get_service)):
    task = svc.get_task(task_id)
    if not task:
        raise HTTPException(status_code=404, detail="Task not found")
    return task


@router.put("/{task_id}", response_model=Task, response_model_exclude_none=True)
def update_task(task_id: str, payload: TaskUpdate, svc: TaskService = Depends(get_service)):
    task = svc.update_task(task_id, payload)
    if not task:
        raise HTTPException(status_code=404, detail="Task not found")
    return task


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(task_id: str, svc: TaskService = Depends(get_service)):
    if not svc.delete_task(task_id):
        raise HTTPException(status_code=404, detail="Task not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.api_route("", methods=["PUT", "DELETE"], include_in_schema=False)
@router.api_route("/", methods=["PUT", "DELETE"], include_in_schema=False)
def missing_task_id():
    raise HTTPException(status_code=405, detail="task id is required")


@router.options("", include_in_schema=False)
@router.options("/", include_in_schema=False)
@router.options("/{task_id}", include_in_schema=False)
def preflight():
    return Response(status_code=200)
