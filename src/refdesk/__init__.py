"""refdesk — client for the referee appointment service."""

__version__ = "0.1.0"
