"""Version resolution for package metadata and the CLI banner."""

from importlib.metadata import PackageNotFoundError as _PackageNotFoundError
from importlib.metadata import version as _package_version

ENGINE_VERSION = "0.1.0"

try:
    __version__ = _package_version("evic")
except _PackageNotFoundError:
    __version__ = ENGINE_VERSION


__all__ = ["__version__"]
