# src/memento/cli/commands.py

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from datetime import date as _date

from ..core.state import AppState
from ..core.views import TASK_FILTERS, filter_tasks, group_events_by_date, newest_first, status_counts
from ..store.models import Event, Project, ProjectColor, TaskStatus, TaskWithProject

CommandHandler = Callable[[AppState, list[str]], str]

SHORT_ID_LEN = 8
_TIME_RE = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /tasks, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- formatting helpers ----


def _short(record_id: str) -> str:
    return record_id[:SHORT_ID_LEN]


def _resolve(prefix: str, ids: Iterable[str]) -> tuple[str | None, str]:
    """
    Resolve an id or unique id prefix.
    Returns (full_id, "") on success, (None, reason) otherwise.
    """
    matches = [i for i in ids if i.startswith(prefix)]
    if len(matches) == 1:
        return matches[0], ""
    if not matches:
        return None, "not found"
    return None, f"ambiguous ({len(matches)} matches), use more characters"


def _format_task(t: TaskWithProject) -> str:
    label = f"{t.task_number} " if t.task_number else ""
    project = f" ({t.project.name})" if t.project is not None else ""
    return f"[{t.status.value}] {_short(t.id)} {label}{t.title}{project}"


def _format_project(p: Project, task_count: int) -> str:
    return f"{_short(p.id)} {p.name} [{p.color.value}] tasks={task_count}"


def _format_event(e: Event) -> str:
    return f"{e.scheduled_time} {_short(e.id)} {e.title}"


def _format_counts(counts: dict[TaskStatus, int]) -> str:
    return ", ".join(f"{s.value}={n}" for s, n in counts.items())


# ---- general ----


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str]) -> str:
    s = state.storage
    counts = status_counts(s.get_all_tasks())
    return (
        "Status:\n"
        f"  Users: {s.count_users()}\n"
        f"  Projects: {s.count_projects()}\n"
        f"  Tasks: {s.count_tasks()} ({_format_counts(counts)})\n"
        f"  Events: {s.count_events()}"
    )


def cmd_whoami(state: AppState, args: list[str]) -> str:
    if not state.current_user_id:
        return "Not signed in."
    user = state.storage.get_user(state.current_user_id)
    if user is None:
        return f"Signed-in user {state.current_user_id} no longer exists."
    return f"{user.name} (@{user.username}) <{user.email}>"


# ---- tasks ----


def cmd_tasks(state: AppState, args: list[str]) -> str:
    """
    /tasks                -> all tasks
    /tasks <status>       -> tasks with that status (pending | in-progress | completed)
    /tasks ... --newest   -> most recently created first
    """
    newest = "--newest" in args
    args = [a for a in args if a != "--newest"]
    status_filter = args[0].lower() if args else "all"
    if status_filter not in TASK_FILTERS:
        return f"Unknown filter: {status_filter}. Use one of: {', '.join(TASK_FILTERS)}."

    all_tasks = state.storage.get_all_tasks()
    tasks = filter_tasks(all_tasks, status_filter)
    if newest:
        tasks = newest_first(tasks)
    header = f"Tasks ({status_filter}): {len(tasks)} [{_format_counts(status_counts(all_tasks))}]"
    if not tasks:
        return f"{header}\n  No tasks found for the selected filter."
    return "\n".join([header, *(f"  {_format_task(t)}" for t in tasks)])


def _find_task(state: AppState, prefix: str) -> tuple[TaskWithProject | None, str]:
    task_id, reason = _resolve(prefix, (t.id for t in state.storage.get_all_tasks()))
    if task_id is None:
        return None, f"Task {prefix}: {reason}."
    task = state.storage.get_task(task_id)
    if task is None:
        return None, f"Task {prefix}: not found."
    return task, ""


def _find_project(state: AppState, prefix: str) -> tuple[Project | None, str]:
    project_id, reason = _resolve(prefix, (p.id for p in state.storage.get_all_projects()))
    if project_id is None:
        return None, f"Project {prefix}: {reason}."
    project = state.storage.get_project(project_id)
    if project is None:
        return None, f"Project {prefix}: not found."
    return project, ""


_TASK_ADD_USAGE = "Usage: /task add [--status <status>] <title> [@<project>] [| <description>]"


def _task_add(state: AppState, args: list[str]) -> str:
    status = TaskStatus.PENDING.value
    if args and args[0] == "--status":
        if len(args) < 2:
            return _TASK_ADD_USAGE
        status = args[1].lower()
        if status not in {s.value for s in TaskStatus}:
            return f"Unknown status: {status}."
        args = args[2:]

    description: str | None = None
    if "|" in args:
        cut = args.index("|")
        description = " ".join(args[cut + 1 :]).strip() or None
        args = args[:cut]

    project_id: str | None = None
    if args and args[-1].startswith("@"):
        project, err = _find_project(state, args[-1][1:])
        if project is None:
            return err
        project_id = project.id
        args = args[:-1]

    title = " ".join(args).strip()
    if not title:
        return f"Task title is required. {_TASK_ADD_USAGE}"

    task = state.storage.create_task(
        title=title,
        status=status,
        description=description,
        project_id=project_id,
    )
    return f"Task created: {_format_task(task)}"


def _task_show(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /task show <id>"
    task, err = _find_task(state, args[0])
    if task is None:
        return err
    lines = [
        _format_task(task),
        f"  id: {task.id}",
        f"  description: {task.description or '-'}",
        f"  project: {task.project.name if task.project else '-'}",
    ]
    if task.project_id and task.project is None:
        lines.append(f"  (project {task.project_id} no longer exists)")
    return "\n".join(lines)


def _task_status(state: AppState, args: list[str]) -> str:
    if len(args) != 2:
        return "Usage: /task status <id> <pending|in-progress|completed>"
    task, err = _find_task(state, args[0])
    if task is None:
        return err
    new_status = args[1].lower()
    if new_status not in {s.value for s in TaskStatus}:
        return f"Unknown status: {new_status}."
    updated = state.storage.update_task(task.id, status=new_status)
    if updated is None:
        return f"Task {args[0]}: not found."
    return f"Task updated: {_format_task(updated)}"


def _task_rename(state: AppState, args: list[str]) -> str:
    if len(args) < 2:
        return "Usage: /task rename <id> <title>"
    task, err = _find_task(state, args[0])
    if task is None:
        return err
    updated = state.storage.update_task(task.id, title=" ".join(args[1:]))
    if updated is None:
        return f"Task {args[0]}: not found."
    return f"Task updated: {_format_task(updated)}"


def _task_describe(state: AppState, args: list[str]) -> str:
    if len(args) < 2:
        return "Usage: /task describe <id> <text|none>"
    task, err = _find_task(state, args[0])
    if task is None:
        return err
    text = " ".join(args[1:])
    description = None if text.lower() == "none" else text
    updated = state.storage.update_task(task.id, description=description)
    if updated is None:
        return f"Task {args[0]}: not found."
    return f"Task updated: {_format_task(updated)}\n  description: {updated.description or '-'}"


def _task_project(state: AppState, args: list[str]) -> str:
    if len(args) != 2:
        return "Usage: /task project <id> <project|none>"
    task, err = _find_task(state, args[0])
    if task is None:
        return err

    project_id: str | None = None
    if args[1].lower() != "none":
        project, err = _find_project(state, args[1])
        if project is None:
            return err
        project_id = project.id

    updated = state.storage.update_task(task.id, project_id=project_id)
    if updated is None:
        return f"Task {args[0]}: not found."
    return f"Task updated: {_format_task(updated)}"


def _task_rm(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /task rm <id>"
    task, err = _find_task(state, args[0])
    if task is None:
        return err
    if not state.storage.delete_task(task.id):
        return f"Task {args[0]}: not found."
    return f"Task deleted: {task.title}"


_TASK_SUBCOMMANDS: dict[str, CommandHandler] = {
    "add": _task_add,
    "show": _task_show,
    "status": _task_status,
    "rename": _task_rename,
    "describe": _task_describe,
    "project": _task_project,
    "rm": _task_rm,
}


def cmd_task(state: AppState, args: list[str]) -> str:
    """
    /task add [--status <status>] <title> [@<project>] [| <description>]
    /task show <id>
    /task status <id> <status>
    /task rename <id> <title>
    /task describe <id> <text|none>
    /task project <id> <project|none>
    /task rm <id>
    """
    if not args or args[0].lower() not in _TASK_SUBCOMMANDS:
        return "Usage: /task add | show | status | rename | describe | project | rm"
    return _TASK_SUBCOMMANDS[args[0].lower()](state, args[1:])


# ---- projects ----


def cmd_projects(state: AppState, args: list[str]) -> str:
    projects = state.storage.get_all_projects()
    if not projects:
        return "No projects yet. Use /project add <color> <name>."
    lines = [f"Projects: {len(projects)}"]
    for p in projects:
        lines.append(f"  {_format_project(p, len(state.storage.get_tasks_by_project(p.id)))}")
    return "\n".join(lines)


def _project_add(state: AppState, args: list[str]) -> str:
    colors = ", ".join(c.value for c in ProjectColor)
    if len(args) < 2:
        return f"Usage: /project add <color> <name> (colors: {colors})"
    color = args[0].lower()
    if color not in {c.value for c in ProjectColor}:
        return f"Unknown color: {color}. Use one of: {colors}."
    project = state.storage.create_project(name=" ".join(args[1:]), color=color)
    return f"Project created: {_format_project(project, 0)}"


def _project_rename(state: AppState, args: list[str]) -> str:
    if len(args) < 2:
        return "Usage: /project rename <id> <name>"
    project, err = _find_project(state, args[0])
    if project is None:
        return err
    updated = state.storage.update_project(project.id, name=" ".join(args[1:]))
    if updated is None:
        return f"Project {args[0]}: not found."
    return f"Project renamed: {project.name} -> {updated.name}"


def _project_rm(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /project rm <id>"
    project, err = _find_project(state, args[0])
    if project is None:
        return err
    orphaned = len(state.storage.get_tasks_by_project(project.id))
    if not state.storage.delete_project(project.id):
        return f"Project {args[0]}: not found."
    msg = f"Project deleted: {project.name}"
    if orphaned:
        msg += f" ({orphaned} task(s) keep a dangling reference)"
    return msg


def _project_tasks(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /project tasks <id>"
    project, err = _find_project(state, args[0])
    if project is None:
        return err
    tasks = state.storage.get_tasks_by_project(project.id)
    if not tasks:
        return f"No tasks in project {project.name}."
    return "\n".join([f"Tasks in {project.name}: {len(tasks)}", *(f"  {_format_task(t)}" for t in tasks)])


_PROJECT_SUBCOMMANDS: dict[str, CommandHandler] = {
    "add": _project_add,
    "rename": _project_rename,
    "rm": _project_rm,
    "tasks": _project_tasks,
}


def cmd_project(state: AppState, args: list[str]) -> str:
    if not args or args[0].lower() not in _PROJECT_SUBCOMMANDS:
        return "Usage: /project add | rename | rm | tasks"
    return _PROJECT_SUBCOMMANDS[args[0].lower()](state, args[1:])


# ---- events ----


def _valid_date(raw: str) -> bool:
    try:
        _date.fromisoformat(raw)
    except ValueError:
        return False
    return True


def cmd_events(state: AppState, args: list[str]) -> str:
    """
    /events          -> all events grouped by date
    /events <date>   -> events on that exact date (YYYY-MM-DD)
    """
    if args:
        day = args[0]
        events = sorted(state.storage.get_events_by_date(day), key=lambda e: e.scheduled_time)
        if not events:
            return f"No events on {day}."
        return "\n".join([f"Events on {day}: {len(events)}", *(f"  {_format_event(e)}" for e in events)])

    grouped = group_events_by_date(state.storage.get_all_events())
    if not grouped:
        return "No events scheduled."
    lines: list[str] = []
    for day, events in grouped.items():
        lines.append(f"{day}:")
        lines.extend(f"  {_format_event(e)}" for e in events)
    return "\n".join(lines)


def _event_add(state: AppState, args: list[str]) -> str:
    if len(args) < 3:
        return "Usage: /event add <YYYY-MM-DD> <HH:MM> <title>"
    day, at = args[0], args[1]
    if not _valid_date(day):
        return f"Invalid date: {day}. Expected YYYY-MM-DD."
    if not _TIME_RE.match(at):
        return f"Invalid time: {at}. Expected HH:MM."
    event = state.storage.create_event(title=" ".join(args[2:]), scheduled_time=at, date=day)
    return f"Event created: {day} {_format_event(event)}"


def _event_rm(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /event rm <id>"
    events = state.storage.get_all_events()
    event_id, reason = _resolve(args[0], (e.id for e in events))
    if event_id is None:
        return f"Event {args[0]}: {reason}."
    if not state.storage.delete_event(event_id):
        return f"Event {args[0]}: not found."
    return f"Event deleted: {args[0]}"


def _event_edit(state: AppState, args: list[str]) -> str:
    if len(args) < 3:
        return "Usage: /event edit <id> <HH:MM> <title>"
    at = args[1]
    if not _TIME_RE.match(at):
        return f"Invalid time: {at}. Expected HH:MM."
    event_id, reason = _resolve(args[0], (e.id for e in state.storage.get_all_events()))
    if event_id is None:
        return f"Event {args[0]}: {reason}."
    updated = state.storage.update_event(event_id, scheduled_time=at, title=" ".join(args[2:]))
    if updated is None:
        return f"Event {args[0]}: not found."
    return f"Event updated: {updated.date} {_format_event(updated)}"


_EVENT_SUBCOMMANDS: dict[str, CommandHandler] = {
    "add": _event_add,
    "edit": _event_edit,
    "rm": _event_rm,
}


def cmd_event(state: AppState, args: list[str]) -> str:
    if not args or args[0].lower() not in _EVENT_SUBCOMMANDS:
        return "Usage: /event add | edit | rm"
    return _EVENT_SUBCOMMANDS[args[0].lower()](state, args[1:])


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show collection counts.")
registry.register("whoami", cmd_whoami, help_text="Show the signed-in user.")
registry.register(
    "tasks", cmd_tasks, help_text="List tasks: /tasks [all|pending|in-progress|completed] [--newest]."
)
registry.register(
    "task", cmd_task, help_text="Manage a task: /task add | show | status | rename | describe | project | rm."
)
registry.register("projects", cmd_projects, help_text="List projects with task counts.")
registry.register("project", cmd_project, help_text="Manage a project: /project add | rename | rm | tasks.")
registry.register("events", cmd_events, help_text="List events: /events [YYYY-MM-DD].")
registry.register("event", cmd_event, help_text="Manage an event: /event add | edit | rm.")
