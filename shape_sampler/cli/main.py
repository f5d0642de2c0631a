"""Typer CLI entrypoint with structured error handling."""

from __future__ import annotations

import sys

import typer

from shape_sampler.cli.commands.sample import sample
from shape_sampler.cli.commands.verify import verify
from shape_sampler.exceptions import ConfigError, DependencyError, InternalError, VerificationError
from shape_sampler.utils.logging import configure_logging, get_logger

app = typer.Typer(help="Shape sampler CLI")


app.command()(sample)
app.command()(verify)


log = get_logger(__name__, component="cli")


def main() -> None:
    configure_logging(component="cli")
    try:
        app()
    except (ConfigError, DependencyError) as exc:
        log.error(str(exc))
        raise SystemExit(1)
    except VerificationError as exc:
        log.error(f"Verification could not run: {exc}")
        raise SystemExit(2)
    except InternalError as exc:
        log.error(f"Internal sampling error: {exc}")
        raise SystemExit(3)
    except KeyboardInterrupt:
        log.info("Interrupted")
        raise SystemExit(130)
    except Exception:
        log.exception("Unhandled exception")
        raise SystemExit(255)


if __name__ == "__main__":
    sys.exit(main())
