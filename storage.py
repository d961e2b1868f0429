# storage.py
import json
import logging
import threading
from pathlib import Path
from typing import List, Optional, Union

from pydantic import ValidationError

from errors import NotFoundError, PersistenceError
from models import Task, TaskIn

logger = logging.getLogger(__name__)


class TaskStore:
    """
    Ordered in-memory task list mirrored to a JSON file.

    Every public method holds one exclusive lock for its whole duration,
    reads included. The file is rewritten after each mutation; a failed
    write is logged and the in-memory change is kept.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._tasks: List[Task] = []
        self._id_counter = 0
        self._created_count = 0
        self._lock = threading.Lock()

    # --- Persistence ---

    def load(self) -> None:
        """Replace the in-memory state with the file contents. A missing file means no tasks."""
        with self._lock:
            if not self.path.exists():
                self._tasks = []
                self._id_counter = 0
                logger.info("No tasks file at %s, starting empty", self.path)
                return

            try:
                with open(self.path, "r", encoding="utf-8") as f:
                    data = json.load(f)
            except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
                raise PersistenceError(f"Failed to load tasks from {self.path}: {e}") from e

            # A literal null is an empty list, anything else must be an array.
            if data is None:
                data = []
            if not isinstance(data, list):
                raise PersistenceError(f"Failed to load tasks from {self.path}: expected a JSON array")

            try:
                tasks = [Task.model_validate(item) for item in data]
            except ValidationError as e:
                raise PersistenceError(f"Failed to load tasks from {self.path}: {e}") from e

            self._tasks = tasks
            self._id_counter = max((t.id for t in tasks), default=0)
            logger.info("Loaded %d tasks from %s", len(tasks), self.path)

    def save(self) -> None:
        """Overwrite the file with the full task list. Callers must hold the lock."""
        data = [t.model_dump() for t in self._tasks]
        try:
            # Encode before opening so a bad title cannot leave a truncated file.
            payload = json.dumps(data, indent=4, ensure_ascii=False).encode("utf-8")
            with open(self.path, "wb") as f:
                f.write(payload)
        except (OSError, ValueError):
            logger.exception("Failed to save tasks to %s", self.path)

    # --- Operations ---

    def list_tasks(self) -> List[Task]:
        with self._lock:
            return [t.model_copy() for t in self._tasks]

    def get_task(self, task_id: int) -> Task:
        with self._lock:
            return self._find(task_id).model_copy()

    def create_task(self, task_in: TaskIn) -> Task:
        with self._lock:
            self._id_counter += 1
            task = Task(id=self._id_counter, title=task_in.title, completed=task_in.completed)
            self._tasks.append(task)
            self.save()
            self._created_count += 1
            logger.info("Task created: %d (id=%d)", self._created_count, task.id)
            return task.model_copy()

    def update_task(self, task_id: int, title: str, completed: bool) -> Task:
        with self._lock:
            task = self._find(task_id)
            task.title = title
            task.completed = completed
            self.save()
            return task.model_copy()

    def delete_task(self, task_id: int) -> None:
        with self._lock:
            index = self._index_of(task_id)
            if index is None:
                raise NotFoundError(task_id)
            del self._tasks[index]
            self.save()

    # --- Helpers ---

    def _index_of(self, task_id: int) -> Optional[int]:
        return next((i for i, t in enumerate(self._tasks) if t.id == task_id), None)

    def _find(self, task_id: int) -> Task:
        index = self._index_of(task_id)
        if index is None:
            raise NotFoundError(task_id)
        return self._tasks[index]
