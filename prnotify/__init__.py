"""prnotify - GitHub pull request events to Slack direct messages."""

__version__ = "0.1.0"
