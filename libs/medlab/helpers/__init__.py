from medlab.helpers.factory import (
    format_action,
    parse_agent_line,
    parse_available_line,
    parse_project,
    parse_task_line,
)

__all__ = [
    "format_action",
    "parse_agent_line",
    "parse_available_line",
    "parse_project",
    "parse_task_line",
]
