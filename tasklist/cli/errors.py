"""CLI error handling: wrap commands to report errors instead of tracebacks."""

from functools import wraps

import typer
from typer import Exit


def error_feedback(f):
    """Wrap command to catch exceptions and report them before exiting.

    Echoes the failure to stderr and exits 1. Expected outcomes such as an
    invalid task number are handled inside the command and never reach here.
    """

    @wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except (SystemExit, Exit):
            raise
        except OSError as e:
            typer.echo(f"File error: {e}", err=True)
            raise typer.Exit(1) from e
        except Exception as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1) from e

    return wrapper
