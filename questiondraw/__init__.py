"""Random interview question drawing from per-group question banks, with a Tk interface."""

__version__ = "1.0.0"