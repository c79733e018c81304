"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import sys

from gh_project_helper import (
    ApplyError,
    AuthenticationError,
    ConfigError,
    PlanLoadError,
    PlanValidationError,
    ProviderError,
)


def main(argv: list[str] | None = None) -> int:
    import gh_project_helper.cli as cli

    parser = cli.build_parser()
    args = parser.parse_args(argv)

    if args.command == "version":
        print(f"gh-project-helper version {cli._parser_package_version()}")
        return 0

    if args.verbose:
        cli.logging.basicConfig(level=cli.logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        if args.command == "apply":
            cli.asyncio.run(cli._run_apply(args))
        elif args.command == "validate":
            return cli._run_validate(args)
        elif args.command == "whoami":
            cli.asyncio.run(cli._run_whoami(args))
        return 0
    except (ConfigError, PlanLoadError, PlanValidationError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        if isinstance(exc, PlanValidationError) and exc.errors != [str(exc)]:
            cli._print_numbered(exc.errors)
        return 3
    except (AuthenticationError, ProviderError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 4
    except ApplyError as exc:
        print(f"error: {exc}", file=sys.stderr)
        if exc.partial_report is not None:
            print(f"partial progress: {exc.partial_report.summary()}", file=sys.stderr)
        return 5
    except Exception as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


__all__ = ["main"]
