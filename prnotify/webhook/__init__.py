"""Webhook server, classifier and handlers for GitHub events."""

from prnotify.webhook.classifier import classify
from prnotify.webhook.handlers import handle_github_event
from prnotify.webhook.server import run_webhook_server

__all__ = ["classify", "handle_github_event", "run_webhook_server"]
