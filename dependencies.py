# dependencies.py
import json
import re

from fastapi import Request
from pydantic import ValidationError

from errors import DecodeError, ParseError
from models import TaskIn
from storage import TaskStore

# A single path segment holding a base-10 integer.
TASK_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


def get_store(request: Request) -> TaskStore:
    """Returns the store the app was built with."""
    return request.app.state.store


def parse_task_id(task_ref: str) -> int:
    """
    Parses the segment after /tasks/ into a task ID.
    Runs before method dispatch, so a bad ID is a 400 whatever the verb.
    """
    if not TASK_ID_PATTERN.fullmatch(task_ref):
        raise ParseError()
    try:
        return int(task_ref)
    except ValueError:
        # Past the interpreter's int string conversion limit.
        raise ParseError() from None


def format_validation_error(exc: ValidationError) -> str:
    messages = []
    for error in exc.errors():
        loc = ".".join(str(part) for part in error.get("loc", ()))
        msg = error.get("msg", "Invalid request body")
        messages.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(messages)


async def decode_task_body(request: Request) -> TaskIn:
    """
    Decodes the request body as JSON whatever the Content-Type says.
    Any failure is a DecodeError carrying the parser's message.
    """
    body = await request.body()
    try:
        data = json.loads(body)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise DecodeError(str(e)) from e
    try:
        return TaskIn.model_validate(data)
    except ValidationError as e:
        raise DecodeError(format_validation_error(e)) from e
