from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Iterable, List, Mapping, NoReturn, Optional

from .adapters.file_storage import FileTodoStorage
from .app.service import TodoService
from .config import TodoSettings, configure_logging
from .domain.errors import FatalError, InvalidCommand, MissingArgs, MissingCommand, UsageError
from .domain.todo_list import TodoList, parse_indices
from .reporting import USAGE, format_json, format_text, format_yaml

LOG = logging.getLogger("todolist.cli")

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_ABORT = 3

HELP_COMMANDS = ("help", "--help", "-h")


def run_cli(argv: Optional[Iterable[str]] = None, env: Optional[Mapping[str, str]] = None) -> int:
    args = list(argv) if argv is not None else sys.argv[1:]
    environ = env if env is not None else os.environ

    try:
        settings = TodoSettings.from_env(environ)
        configure_logging(settings.log_level)
        settings.ensure_data_dir()
        service = TodoService(FileTodoStorage(settings.todo_path))
        todo_list = service.load_list()
        return _dispatch(args, service, todo_list)
    except UsageError as err:
        LOG.debug("usage error: %s", err)
        sys.stderr.write(USAGE)
        return EXIT_USAGE
    except FatalError as err:
        return _abort(str(err))


def _dispatch(args: List[str], service: TodoService, todo_list: TodoList) -> int:
    if not args:
        raise MissingCommand()
    command, rest = args[0], args[1:]
    LOG.debug("command=%s args=%d entries=%d", command, len(rest), len(todo_list))

    if command == "add":
        if not rest:
            raise MissingArgs(command)
        service.add(todo_list, rest)
        return EXIT_OK
    if command == "done":
        return _handle_done(rest, service, todo_list)
    if command == "list":
        return _handle_list(rest, todo_list)
    if command in HELP_COMMANDS:
        sys.stdout.write(USAGE)
        return EXIT_OK
    raise InvalidCommand(command)


def _handle_done(rest: List[str], service: TodoService, todo_list: TodoList) -> int:
    if not rest:
        raise MissingArgs("done")
    selection = parse_indices(rest)
    for raw in selection.rejected:
        print(f"{raw} could not be parsed into a positive integer")
    for value in selection.duplicates:
        print(f"{value} given more than once; ignoring duplicate")
    for text in service.complete(todo_list, selection.indices):
        print(f"DONE!: {text}")
    return EXIT_OK


class _ListArgumentParser(argparse.ArgumentParser):
    """Reports bad ``list`` options as InvalidCommand instead of exiting."""

    def error(self, message: str) -> NoReturn:
        LOG.debug("list: %s", message)
        raise InvalidCommand("list")


def _handle_list(rest: List[str], todo_list: TodoList) -> int:
    parser = _ListArgumentParser(prog="todo list", description="Print the todo list", add_help=False)
    parser.add_argument("-h", "--help", action="store_true")
    output = parser.add_mutually_exclusive_group()
    output.add_argument("--json", action="store_true", help="Emit the list as JSON")
    output.add_argument("--yaml", action="store_true", help="Emit the list as YAML")
    args, extra = parser.parse_known_args(rest)
    if extra:
        LOG.debug("ignoring extra list arguments: %s", extra)

    if args.help:
        sys.stdout.write(USAGE)
    elif args.json:
        sys.stdout.write(format_json(todo_list))
    elif args.yaml:
        sys.stdout.write(format_yaml(todo_list))
    else:
        sys.stdout.write(format_text(todo_list))
    return EXIT_OK


def _abort(message: str) -> int:
    print(message, file=sys.stderr)
    return EXIT_ABORT


def main() -> None:
    sys.exit(run_cli())


if __name__ == "__main__":
    main()
