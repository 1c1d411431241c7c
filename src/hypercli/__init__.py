"""hyper-cli: plugin manager and launcher for the Hyper terminal."""

__version__ = "0.1.0"
