"""Building blocks for applications: events, versions, update checks, configuration, directories, file watching and IPC."""

__version__ = "0.1.0"