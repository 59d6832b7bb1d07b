from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("project-renamer")
except PackageNotFoundError:
    __version__ = "0.1.0.dev"

__all__ = ["__version__"]
