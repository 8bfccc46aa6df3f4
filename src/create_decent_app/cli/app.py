"""CLI app entrypoint and error mapping."""

from __future__ import annotations

from rich.console import Console

from create_decent_app.contracts.exceptions import ErrorKind, ScaffoldError


def main(argv: list[str] | None = None) -> int:
    import create_decent_app.cli as cli

    parser = cli.build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        cli.logging.basicConfig(level=cli.logging.DEBUG, format="%(name)s %(message)s", stream=cli.sys.stderr)

    err_console = Console(stderr=True)
    try:
        return cli._run_create(args)
    except KeyboardInterrupt:
        err_console.print("\nAborted.")
        return 1
    except ScaffoldError as exc:
        cli.print_error(err_console, str(exc))
        if exc.kind is ErrorKind.INTERNAL:
            err_console.print_exception()
        return 1
    except Exception as exc:
        cli.print_error(err_console, str(exc))
        err_console.print_exception()
        return 1


__all__ = ["main"]
