"""git-nubs: convenience helpers around the git command line."""

__version__ = "1.0.0"
