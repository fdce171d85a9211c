"""Command registry and the dispatcher that turns failures into status messages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional, Sequence

from modal_select.application import Application
from modal_select.errors import CommandError
from modal_select.runtime.telemetry import span

from . import application, buffer, cursor, search, selection, view

CommandHandler = Callable[[Application], None]


@dataclass(frozen=True, slots=True)
class CommandRef:
    """Named command handler."""

    id: str
    handler: CommandHandler
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("CommandRef id cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")

    def __call__(self, app: Application) -> None:
        self.handler(app)


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Outcome of a dispatched command, ready to show in a status line."""

    ok: bool
    command_id: str
    status: str = "ok"
    message: Optional[str] = None


class CommandRegistry:
    """Owns command references keyed by id."""

    def __init__(self) -> None:
        self._commands: Dict[str, CommandRef] = {}

    def __contains__(self, command_id: object) -> bool:
        return command_id in self._commands

    def register(self, command: CommandRef, *, replace: bool = False) -> CommandRef:
        if not replace and command.id in self._commands:
            raise ValueError(f"Command '{command.id}' already registered")
        self._commands[command.id] = command
        return command

    def get(self, command_id: str) -> CommandRef:
        try:
            return self._commands[command_id]
        except KeyError as exc:
            raise KeyError(f"Command '{command_id}' is not registered") from exc

    def ids(self) -> tuple[str, ...]:
        return tuple(sorted(self._commands))


DEFAULT_COMMANDS: tuple[CommandRef, ...] = (
    CommandRef(
        id="application.switch_to_normal_mode",
        handler=application.switch_to_normal_mode,
        description="Enter normal mode",
    ),
    CommandRef(
        id="application.switch_to_insert_mode",
        handler=application.switch_to_insert_mode,
        description="Enter insert mode",
    ),
    CommandRef(
        id="application.switch_to_select_mode",
        handler=application.switch_to_select_mode,
        description="Start a character selection",
    ),
    CommandRef(
        id="application.switch_to_select_line_mode",
        handler=application.switch_to_select_line_mode,
        description="Start a line selection",
    ),
    CommandRef(
        id="application.switch_to_search_mode",
        handler=application.switch_to_search_mode,
        description="Enter search mode",
    ),
    CommandRef(
        id="buffer.paste",
        handler=buffer.paste,
        description="Paste clipboard content",
    ),
    CommandRef(
        id="buffer.undo",
        handler=buffer.undo,
        description="Undo the last change",
    ),
    CommandRef(
        id="buffer.redo",
        handler=buffer.redo,
        description="Redo the last undone change",
    ),
    CommandRef(
        id="cursor.move_left",
        handler=cursor.move_left,
        description="Move cursor left",
    ),
    CommandRef(
        id="cursor.move_right",
        handler=cursor.move_right,
        description="Move cursor right",
    ),
    CommandRef(
        id="cursor.move_up",
        handler=cursor.move_up,
        description="Move cursor up",
    ),
    CommandRef(
        id="cursor.move_down",
        handler=cursor.move_down,
        description="Move cursor down",
    ),
    CommandRef(
        id="cursor.move_to_first_line",
        handler=cursor.move_to_first_line,
        description="Jump to first line",
    ),
    CommandRef(
        id="cursor.move_to_last_line",
        handler=cursor.move_to_last_line,
        description="Jump to last line",
    ),
    CommandRef(
        id="search.accept_query",
        handler=search.accept_query,
        description="Run the search query",
    ),
    CommandRef(
        id="search.select_next_result",
        handler=search.select_next_result,
        description="Select next match",
    ),
    CommandRef(
        id="search.select_previous_result",
        handler=search.select_previous_result,
        description="Select previous match",
    ),
    CommandRef(
        id="selection.delete",
        handler=selection.delete,
        description="Delete the selection",
    ),
    CommandRef(
        id="selection.copy",
        handler=selection.copy,
        description="Copy the selection",
    ),
    CommandRef(
        id="selection.copy_and_delete",
        handler=selection.copy_and_delete,
        description="Cut the selection",
    ),
    CommandRef(
        id="selection.change",
        handler=selection.change,
        description="Replace the selection",
    ),
    CommandRef(
        id="selection.select_all",
        handler=selection.select_all,
        description="Select the whole buffer",
    ),
    CommandRef(
        id="selection.sort_lines",
        handler=selection.sort_lines,
        description="Sort the selected lines",
    ),
    CommandRef(
        id="view.scroll_to_cursor",
        handler=view.scroll_to_cursor,
        description="Scroll the cursor into view",
    ),
)


def load_default_commands(
    registry: CommandRegistry,
    *,
    replace: bool = False,
    include: Sequence[str] | None = None,
    extra_commands: Iterable[CommandRef] | None = None,
) -> CommandRegistry:
    """Register built-in commands, optionally limited to the ids in ``include``."""

    allowed = set(include) if include is not None else None
    for command in DEFAULT_COMMANDS:
        if allowed is not None and command.id not in allowed:
            continue
        registry.register(command, replace=replace)
    for command in extra_commands or ():
        registry.register(command, replace=replace)
    return registry


def dispatch(
    app: Application, command_id: str, *, registry: CommandRegistry | None = None
) -> CommandResult:
    """Run a command, reporting recoverable failures instead of raising them."""

    command = (registry or _default_registry()).get(command_id)
    try:
        with span(
            f"command::{command_id}",
            component="commands",
            metadata={"command": command_id, "mode": app.mode.name},
        ):
            command(app)
    except CommandError as exc:
        app.bus.emit("command.error", {"command": command_id, "message": str(exc)})
        return CommandResult(
            ok=False, command_id=command_id, status="error", message=str(exc)
        )
    return CommandResult(ok=True, command_id=command_id)


_DEFAULT_REGISTRY: Optional[CommandRegistry] = None


def _default_registry() -> CommandRegistry:
    global _DEFAULT_REGISTRY
    if _DEFAULT_REGISTRY is None:
        _DEFAULT_REGISTRY = load_default_commands(CommandRegistry())
    return _DEFAULT_REGISTRY


__all__ = [
    "CommandHandler",
    "CommandRef",
    "CommandResult",
    "CommandRegistry",
    "DEFAULT_COMMANDS",
    "load_default_commands",
    "dispatch",
]
