"""
Stack output helpers.

Writes resolved stack outputs to a dotenv-style file so local tooling
(frontend build scripts, smoke tests) can read them without calling
`pulumi stack output`.
"""

from pathlib import Path
from typing import Any

import pulumi


def format_env_lines(values: dict[str, Any]) -> list[str]:
    """
    Render output values as KEY=value lines.

    Args:
        values: Resolved output values keyed by export name

    Returns:
        Sorted lines with upper-cased keys
    """
    return [f"{key.upper()}={value}" for key, value in sorted(values.items())]


def write_outputs_to_env(outputs: dict[str, pulumi.Input[Any]], filename: str) -> None:
    """
    Write stack outputs to an env file once they resolve.

    Skipped during preview, where most values are still unknown.

    Args:
        outputs: Export name to output value
        filename: Destination path, relative to the Pulumi project directory
    """
    if pulumi.runtime.is_dry_run():
        return

    def _write(values: dict[str, Any]) -> None:
        Path(filename).write_text("\n".join(format_env_lines(values)) + "\n")
        pulumi.log.info(f"Wrote {len(values)} output(s) to {filename}")

    pulumi.Output.all(**outputs).apply(_write)
