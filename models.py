# models.py
from pydantic import BaseModel, StrictBool, StrictInt, StrictStr, field_validator


class TaskIn(BaseModel):
    """Request body for creating or updating a task. Unknown keys, `id` included, are ignored."""
    title: StrictStr = ""
    completed: StrictBool = False

    @field_validator("title", mode="before")
    @classmethod
    def replace_lone_surrogates(cls, value):
        # JSON "\ud800" escapes decode to lone surrogates, which UTF-8 cannot
        # store. They become U+FFFD; valid pairs were already joined by the parser.
        if isinstance(value, str):
            return value.encode("utf-16", "surrogatepass").decode("utf-16", "replace")
        return value


class Task(BaseModel):
    id: StrictInt
    title: StrictStr = ""
    completed: StrictBool = False
