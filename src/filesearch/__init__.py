"""filesearch - recursive file search with regex and size filters."""

__version__ = "0.1.0"
