"""weekplan - place interdependent tasks into a working week."""

__version__ = "0.1.0"
