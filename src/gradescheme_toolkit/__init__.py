"""Top-level package for the Grading Scheme Toolkit.

Provides subpackages:
- gradescheme_toolkit.core – stored scheme models, numeric helpers, validation
- gradescheme_toolkit.editor – the in-memory grading scheme editor
- gradescheme_toolkit.gui – Qt model adapter for the editor
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        try:
            content = pyproject.read_text()
            for line in content.splitlines():
                if line.strip().startswith("version"):
                    # Parse: version = "0.3.0"
                    return line.split("=")[1].strip().strip('"').strip("'")
        except OSError:
            pass

    from importlib.metadata import PackageNotFoundError, version as pkg_version
    try:
        return pkg_version("gradescheme_toolkit")
    except PackageNotFoundError:
        return "0.0.0"

__version__ = _get_version()
__copyright__ = "Copyright 2026 Gradescheme Toolkit contributors"
__all__: list[str] = ["__version__"]
