"""
Stack output export helpers.

Writes resolved stack outputs to a dotenv file so local tooling can pick up
instance addresses and the bucket name without calling `pulumi stack output`.
"""

from pathlib import Path
from typing import Any, Mapping

import pulumi


def format_env_lines(values: Mapping[str, Any]) -> str:
    """
    Render output values as KEY=value lines.

    Keys are upper-cased. None values are skipped; values containing
    whitespace or '#' are double-quoted.

    Args:
        values: Resolved output values

    Returns:
        File content with a trailing newline (empty string for no values)
    """
    lines = []
    for key, value in values.items():
        if value is None:
            continue
        text = str(value)
        if any(ch.isspace() for ch in text) or "#" in text:
            text = '"' + text.replace('"', '\\"') + '"'
        lines.append(f"{key.upper()}={text}")
    return "\n".join(lines) + "\n" if lines else ""


def write_outputs_to_env(
    outputs: Mapping[str, pulumi.Input[Any]],
    filename: str,
    directory: Path | None = None,
) -> None:
    """
    Write stack outputs to a dotenv file once they resolve.

    Nothing is written during preview, since output values are unknown then.

    Args:
        outputs: Mapping of export name to output
        filename: Target file name
        directory: Target directory (defaults to the current working directory)
    """
    if pulumi.runtime.is_dry_run():
        return

    target = (directory or Path.cwd()) / filename

    def _write(resolved: dict[str, Any]) -> None:
        target.write_text(format_env_lines(resolved), encoding="utf-8")
        pulumi.log.info(f"Wrote {len(resolved)} outputs to {target}")

    pulumi.Output.all(**outputs).apply(_write)
