r"""Resolve directive-supplied paths and extract line ranges from files.

The ``include`` directive hands raw text such as ``@notes/recursion/find.ts``
or ``snippets/fib.py[3..5]`` to :class:`PathResolver`. Paths are trimmed,
absolute paths pass through, the first registered alias prefix is swapped for
its target, and everything else resolves against a fixed base directory (the
directory holding ``config.yml``) so builds behave the same from any working
directory.

Line ranges are 1-based and inclusive. Bounds past the end of the file are
clamped by slicing rather than rejected; existing notes rely on that.

Example
-------
>>> from pathlib import Path
>>> resolver = PathResolver(Path("/site"), {"@lib": "/site/lib"})
>>> resolver.resolve(" @lib/util.py ").as_posix()
'/site/lib/util.py'
"""

from __future__ import annotations

import re
import typing as typ
from pathlib import Path

RANGE_PATTERN = re.compile(r"^(?P<path>.+)\[(?P<start>\d+)\.\.(?P<end>\d+)\]$")


class PathResolver:
    """Map alias-prefixed or relative paths onto concrete files."""

    def __init__(
        self, base_dir: Path, aliases: typ.Mapping[str, str] | None = None
    ) -> None:
        """Initialize the resolver.

        Parameters
        ----------
        base_dir : Path
            Directory relative paths resolve against.
        aliases : Mapping[str, str], optional
            Prefix to target-directory substitutions, tried in insertion order.
        """
        self.base_dir = base_dir
        self.aliases = dict(aliases or {})

    def resolve(self, raw_path: str) -> Path:
        """Return the concrete path for ``raw_path``."""
        text = raw_path.strip()
        if Path(text).is_absolute():
            return Path(text)
        for alias, target in self.aliases.items():
            if text.startswith(alias):
                text = text.replace(alias, target, 1)
                break
        return (self.base_dir / text).resolve()

    def read(self, raw_path: str) -> str:
        """Return file content for ``raw_path``, honouring ``[start..end]``.

        Raises
        ------
        FileNotFoundError
            If the resolved file does not exist.
        """
        text = raw_path.strip()
        match = RANGE_PATTERN.match(text)
        if not match:
            return self.resolve(text).read_text(encoding="utf-8")
        content = self.resolve(match.group("path")).read_text(encoding="utf-8")
        start = int(match.group("start"))
        end = int(match.group("end"))
        return "\n".join(content.split("\n")[start - 1 : end])


__all__ = ["RANGE_PATTERN", "PathResolver"]
