"""Result envelope shared by every plan tool."""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ToolResult(BaseModel, Generic[T]):
    """Uniform tool response.

    ``text`` is for display, ``data`` is the structured payload and
    ``message`` is a one-line human summary.
    """

    text: str
    data: T
    message: str
