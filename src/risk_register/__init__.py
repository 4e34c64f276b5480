from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("risk-register")
except PackageNotFoundError:
    __version__ = "0.1.0"
