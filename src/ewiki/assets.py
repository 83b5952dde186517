"""Asset discovery for bundled resources.

Locates the templates and static files shipped inside the ewiki package.
"""

from importlib.resources import files
from pathlib import Path

# Static sub-routes served verbatim from the bundle
STATIC_DIRS = ("css", "font", "fonts", "img", "js")


def get_resource_dir(name: str = "") -> Path:
    """Return path to a bundled resource directory.

    Args:
        name: Subdirectory of the bundle, e.g. "templates" or "css"

    Returns:
        Path to the requested directory (the bundle root for "")

    Raises:
        FileNotFoundError: If bundled resources are not installed.
    """
    res = files("ewiki").joinpath("res")
    if not res.is_dir():
        msg = "Bundled resources not found. Reinstall the ewiki package."
        raise FileNotFoundError(msg)
    if name:
        res = res.joinpath(name)
    return Path(str(res))


def get_templates_dir() -> Path:
    """Return path to the bundled page templates."""
    return get_resource_dir("templates")
