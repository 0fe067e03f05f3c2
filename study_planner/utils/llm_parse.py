"""Tool-call extraction and schema validation for gateway responses."""

from __future__ import annotations

import json
from typing import Any, Type, TypeVar

from pydantic import BaseModel

T = TypeVar("T", bound=BaseModel)


class ToolCallError(ValueError):
    """The response carries no usable tool call."""


def extract_tool_arguments(data: Any, tool_name: str) -> Any:
    """Return the raw arguments of the first tool call in the first choice.

    The call must be named ``tool_name``.
    """
    try:
        tool_call = data["choices"][0]["message"]["tool_calls"][0]
        function = tool_call["function"]
    except (KeyError, IndexError, TypeError) as exc:
        raise ToolCallError("Invalid response from AI service") from exc

    if not isinstance(function, dict) or function.get("name") != tool_name:
        raise ToolCallError("Invalid response from AI service")
    if "arguments" not in function:
        raise ToolCallError("Tool call has no arguments")
    return function["arguments"]


def parse_json_with_schema(raw: Any, schema: Type[T]) -> T:
    # Some gateways hand back arguments already decoded.
    data = json.loads(raw) if isinstance(raw, (str, bytes)) else raw
    return schema.model_validate(data)
