import os
from pathlib import Path

DEFAULT_CONFIG_NAME = "graphwire.yaml"


def get_configfile(explicit: str | os.PathLike | None = None) -> Path | None:
    """
    Locate the YAML configuration file, if any.

    Priority: explicit argument > GRAPHWIRECONFIG environment variable >
    'graphwire.yaml' in the current working directory. The file is
    optional only in the last case; a path requested explicitly or through
    the environment must exist.
    """
    raw = explicit or os.getenv("GRAPHWIRECONFIG") or None

    if raw is None:
        file = Path.cwd() / DEFAULT_CONFIG_NAME
        return file if file.is_file() else None

    file = Path(raw)
    if not file.is_file():
        raise SystemExit(
            f"[config] Configuration file not found: '{file}'.\n"
            "  - Pass an existing path with --config <file.yaml>\n"
            "  - Or fix the GRAPHWIRECONFIG environment variable\n"
            f"  - Or place a '{DEFAULT_CONFIG_NAME}' file in the current working directory."
        )

    return file
