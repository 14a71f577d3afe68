"""Cyclopts CLI entrypoint for building the notes site.

The ``notes-site`` console script loads ``config.yml``, renders every note
through the directive pipeline, and writes the site into the build
directory. The only positional argument overrides the output directory;
without it the build lands in ``paths.output`` (``build`` beside the config
file by default).

Examples
--------
Build into the configured directory:

>>> from notes_site.cli import main
>>> main()  # doctest: +SKIP

Build into a scratch directory:

>>> from notes_site.cli import app
>>> app(["/tmp/site"])  # doctest: +SKIP
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._constants import DEFAULT_CONFIG_NAME
from .config import load_site_config
from .generator import SiteBuilder

DEFAULT_CONFIG = Path(DEFAULT_CONFIG_NAME)

app = App(name="notes-site", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.default
def build(
    output_dir: typ.Annotated[
        Path | None, Parameter(help="Override the output folder")
    ] = None,
    /,
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
) -> None:
    """Build every configured page, the index, and static assets.

    Parameters
    ----------
    output_dir : Path or None, optional
        Directory to write the site into; defaults to the config's
        ``paths.output``.
    config : Path, optional
        Path to ``config.yml`` (overridable via ``INPUT_CONFIG``).

    Returns
    -------
    None
        Writes the site and prints each written path.

    Raises
    ------
    SymbolLookupError, DirectiveParseError, SiteConfigError, OSError
        Any failure aborts the build; the exception carries notes naming the
        page and directive involved.
    """
    site_config = load_site_config(config)
    builder = SiteBuilder(site_config, output_dir=output_dir)
    for path in builder.run():
        print(f"wrote {_format_path(path)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the `notes-site` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
