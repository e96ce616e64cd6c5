from __future__ import annotations

import json
from typing import Any, Dict

import yaml

from .domain.todo_list import TodoList

USAGE = "\n".join(
    [
        "Usage: todo [COMMAND] [ARGS]...",
        "Commands:",
        "  add TODOS...    Add to todo list",
        "  done INDICES... Remove indices from list",
        "  list            Print the list",
        "  help            Print this text",
    ]
) + "\n"


def summarise(todo_list: TodoList) -> Dict[str, Any]:
    return {
        "count": len(todo_list),
        "entries": [
            {"index": position, "text": text}
            for position, text in todo_list.numbered()
        ],
    }


def format_text(todo_list: TodoList) -> str:
    lines = [f"{position} {text}" for position, text in todo_list.numbered()]
    # An empty list still prints one blank line.
    return "\n".join(lines) + "\n"


def format_json(todo_list: TodoList) -> str:
    return json.dumps(summarise(todo_list), indent=2, ensure_ascii=False) + "\n"


def format_yaml(todo_list: TodoList) -> str:
    return yaml.safe_dump(summarise(todo_list), sort_keys=False, allow_unicode=True)
