"""Roster Page server"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("roster-page")
except PackageNotFoundError:
    __version__ = "dev"
