# src/rodo/render/painter.py

from __future__ import annotations

from rich.text import Text

from ..tasks.task_models import Task, TaskList

CIRCLE = "●"
CHECK = "✓"

NO_ACTIVE_LIST = "no active task list"


class Painter:
    """Turn a TaskList into styled terminal text."""

    def __init__(self, *, color: bool = True) -> None:
        self.color = color

    def _style(self, style: str) -> str:
        return style if self.color else ""

    def paint_task(self, task: Task) -> Text:
        status = (
            Text(CHECK, style=self._style("bold green"))
            if task.done
            else Text(CIRCLE, style=self._style("bold bright_yellow"))
        )
        line = Text(f"{task.index}. ")
        line.append(task.title, style=self._style("bold blue"))
        line.append(":")
        if task.description is not None:
            line.append(f" {task.description}")
        line.append(" ")
        line.append_text(status)
        return line

    def paint_task_list(self, task_list: TaskList) -> Text:
        body = Text("\n").join(self.paint_task(t) for t in task_list.tasks)
        if task_list.name is None:
            return body

        out = Text(task_list.name)
        out.append("\n" + "=" * len(task_list.name))
        if task_list.tasks:
            out.append("\n")
            out.append_text(body)
        return out
