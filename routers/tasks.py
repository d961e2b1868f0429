# routers/tasks.py
import logging
from typing import List

from fastapi import APIRouter, Depends, Response
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT

from config import ROUTED_METHODS
from dependencies import decode_task_body, get_store, parse_task_id
from errors import MethodNotAllowedError
from models import Task, TaskIn
from storage import TaskStore

logger = logging.getLogger(__name__)

# --- Router Setup ---
router = APIRouter(
    prefix="/tasks",
    tags=["Task Management"],
)

# --- Constants ---
COLLECTION_METHODS = ["GET", "POST"]
ITEM_METHODS = ["GET", "PUT", "DELETE"]

# --- Collection Endpoints ---

@router.get("", response_model=List[Task])
def list_tasks(store: TaskStore = Depends(get_store)):
    """Get the list of all tasks in creation order."""
    return store.list_tasks()

@router.post("", response_model=Task, status_code=HTTP_201_CREATED)
def create_task(task_in: TaskIn = Depends(decode_task_body), store: TaskStore = Depends(get_store)):
    """Creates a task and assigns it the next ID."""
    return store.create_task(task_in)

@router.api_route(
    "",
    methods=[m for m in ROUTED_METHODS if m not in COLLECTION_METHODS],
    include_in_schema=False,
)
def collection_method_not_allowed():
    raise MethodNotAllowedError(COLLECTION_METHODS)

# --- Item Endpoints ---
# The path converter also matches "/tasks/" and multi-segment refs so that
# parse_task_id can reject them with a 400 instead of a redirect or 404.

@router.get("/{task_ref:path}", response_model=Task)
def get_task(task_id: int = Depends(parse_task_id), store: TaskStore = Depends(get_store)):
    return store.get_task(task_id)

@router.put("/{task_ref:path}", response_model=Task)
def update_task(
    task_id: int = Depends(parse_task_id),
    task_in: TaskIn = Depends(decode_task_body),
    store: TaskStore = Depends(get_store),
):
    """Replaces title and completed. The ID never changes."""
    return store.update_task(task_id, task_in.title, task_in.completed)

@router.delete("/{task_ref:path}", status_code=HTTP_204_NO_CONTENT)
def delete_task(task_id: int = Depends(parse_task_id), store: TaskStore = Depends(get_store)):
    store.delete_task(task_id)
    logger.info("Task %d deleted", task_id)
    return Response(status_code=HTTP_204_NO_CONTENT)

@router.api_route(
    "/{task_ref:path}",
    methods=[m for m in ROUTED_METHODS if m not in ITEM_METHODS],
    include_in_schema=False,
)
def item_method_not_allowed(task_id: int = Depends(parse_task_id)):
    raise MethodNotAllowedError(ITEM_METHODS)
