"""Syntax highlighting of rendered HTML through an external Prism script."""

from __future__ import annotations

import subprocess
from pathlib import Path

from dandesite.paths import absolute_process_rehype_prism_plus_filename


class PrismError(RuntimeError):
    """The highlighting process could not be run or reported a failure."""


def process_html_with_prism(html: str, script: str | Path | None = None) -> str:
    """Pipe *html* through ``node <script>`` and return its trimmed output.

    The script defaults to the project's rehype-prism-plus processor. Raises
    :class:`PrismError` when the process cannot start, exits with a non-zero
    status or writes output that is not UTF-8.
    """
    if script is None:
        script = absolute_process_rehype_prism_plus_filename()

    try:
        completed = subprocess.run(
            ["node", str(script)],
            input=html.encode("utf-8"),
            capture_output=True,
            check=False,
        )
    except OSError as exc:
        raise PrismError(f"Failed to start node: {exc}") from exc

    if completed.returncode != 0:
        raise PrismError(completed.stderr.decode("utf-8", errors="replace"))

    try:
        result = completed.stdout.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise PrismError(f"Highlighter output is not valid UTF-8: {exc}") from exc

    return result.strip()