"""Task CLI: `tasklist add <text>`, `tasklist list`, `tasklist remove <n>`."""

import logging
import sys
from typing import Annotated

import typer

from tasklist import config, operations
from tasklist.cli import output
from tasklist.cli.errors import error_feedback
from tasklist.errors import InvalidTaskIndexError
from tasklist.format import format_task_list, tasks_as_json
from tasklist.store import TaskStore

logger = logging.getLogger(__name__)

NOT_FOUND = "command not found !"
INVALID_INDEX = "⚠️ Invalid task number."

main_app = typer.Typer(
    add_completion=False,
    help="""Task list kept in a local tasks.json. Commands: add <text>, list, remove <n>.""",
)


def setup_logging(level: int) -> None:
    logging.basicConfig(
        level=level,
        format="[tasklist] %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )


def _add(ctx: typer.Context, store: TaskStore, argument: str | None) -> None:
    task = operations.add_task(store, argument)
    output.out_text(f"Task Added {task.task}", ctx.obj)


def _list(ctx: typer.Context, store: TaskStore, argument: str | None) -> None:
    tasks = operations.list_tasks(store)
    if output.echo_json(tasks_as_json(tasks), ctx):
        return
    if tasks:
        typer.echo(format_task_list(tasks))


def _remove(ctx: typer.Context, store: TaskStore, argument: str | None) -> None:
    try:
        removed = operations.remove_task(store, operations.parse_index(argument))
    except InvalidTaskIndexError as e:
        logger.debug("%s", e)
        typer.echo(INVALID_INDEX)
        return
    output.out_text(f"🗑️ Task Removed: {removed.task}", ctx.obj)


COMMANDS = {
    "add": _add,
    "list": _list,
    "remove": _remove,
}


@main_app.command(
    context_settings={
        "help_option_names": ["-h", "--help"],
        "allow_extra_args": True,
        "ignore_unknown_options": True,
        "allow_interspersed_args": False,
    }
)
@error_feedback
def dispatch(
    ctx: typer.Context,
    command: Annotated[str | None, typer.Argument(help="add | list | remove")] = None,
    argument: Annotated[
        str | None, typer.Argument(help="Task text for add, 1-based number for remove")
    ] = None,
    file: Annotated[
        str | None, typer.Option("--file", "-f", help="Tasks file (default ./tasks.json).")
    ] = None,
    json_output: bool = typer.Option(False, "--json", "-j", help="Output in JSON format."),
    quiet_output: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress non-essential output."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging to stderr."),
):
    """Add, list or remove tasks. Options go before the command."""
    output.init_context(ctx, json_output, quiet_output)

    handler = COMMANDS.get(command or "")
    if handler is None:
        typer.echo(NOT_FOUND)
        return

    setup_logging(config.log_level(verbose))
    store = TaskStore(config.tasks_file(file))
    logger.debug("%s using %r", command, store)
    handler(ctx, store, argument)


def main() -> None:
    """Entry point for the tasklist command."""
    main_app()


app = main_app

__all__ = ["app", "main"]
