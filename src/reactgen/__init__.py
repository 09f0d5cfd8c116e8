"""reactgen: scaffolding tool for React projects."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("reactgen")
except PackageNotFoundError:
    __version__ = "0.0.0"
