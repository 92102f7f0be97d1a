"""Minimal webhook HTTP server for GitHub events.

Serves health check and webhook path. Deliveries are not signature
verified.
"""

import json
import logging
from http.server import BaseHTTPRequestHandler, HTTPServer
from typing import Any
from urllib.parse import parse_qs

from prnotify.config import AppConfig
from prnotify.notifier import SlackNotifier
from prnotify.webhook.handlers import handle_github_event

LOG = logging.getLogger("prnotify.webhook")


class WebhookHandler(BaseHTTPRequestHandler):
    """Handle GET /health and POST to the configured webhook path."""

    config: AppConfig
    notifier: SlackNotifier

    def do_GET(self) -> None:
        if self.path == "/health" or self.path == "/":
            self._send_json(200, {"status": "ok", "service": "prnotify"})
            return
        self.send_response(404)
        self.end_headers()

    def do_POST(self) -> None:
        if self.path == self.config.webhook.path:
            self._handle_github_webhook()
            return
        self.send_response(404)
        self.end_headers()

    def _send_json(self, status: int, data: dict) -> None:
        self.send_response(status)
        self.send_header("Content-Type", "application/json")
        self.end_headers()
        self.wfile.write(json.dumps(data).encode())

    def _parse_webhook_body(self, body: bytes) -> dict:
        """Parse webhook body as JSON.

        Supports raw JSON and application/x-www-form-urlencoded (payload=...).
        """
        if not body:
            return {}
        content_type = self.headers.get("Content-Type", "")
        if "application/x-www-form-urlencoded" in content_type:
            parsed = parse_qs(body.decode("utf-8", errors="replace"), keep_blank_values=True)
            raw = (parsed.get("payload") or [None])[0]
            if raw is None:
                return {}
            return json.loads(raw)
        return json.loads(body.decode())

    def _handle_github_webhook(self) -> None:
        try:
            length = int(self.headers.get("Content-Length", 0))
        except ValueError:
            length = -1
        if length < 0:
            LOG.warning("Bad Content-Length: %r", self.headers.get("Content-Length"))
            self._send_json(400, {"received": False, "error": "bad Content-Length"})
            return
        body = self.rfile.read(length) if length else b""
        try:
            payload = self._parse_webhook_body(body)
        except (json.JSONDecodeError, UnicodeDecodeError):
            LOG.warning("Invalid webhook JSON (%d bytes)", len(body))
            self._send_json(200, {"received": False})
            return
        event = self.headers.get("X-GitHub-Event", "")
        LOG.info("Webhook event: %s (action: %s)", event, payload.get("action") if isinstance(payload, dict) else None)
        messages = []
        try:
            messages = handle_github_event(event, payload, self.notifier.send)
        except Exception as e:
            LOG.exception("Failed to deliver notifications for %s: %s", event, e)
        self._send_json(200, {"received": True, "messages": len(messages)})

    def log_message(self, format: str, *args: Any) -> None:
        LOG.debug(format, *args)


def make_server(config: AppConfig, notifier: SlackNotifier | None = None) -> HTTPServer:
    """Build the HTTP server bound to webhook.host:webhook.port."""
    WebhookHandler.config = config
    WebhookHandler.notifier = notifier or SlackNotifier.from_config(config)
    return HTTPServer((config.webhook.host, config.webhook.port), WebhookHandler)


def run_webhook_server(config: AppConfig, notifier: SlackNotifier | None = None) -> None:
    """Run HTTP server for webhooks and health check."""
    server = make_server(config, notifier)
    LOG.info("Webhook server listening on %s:%s%s", config.webhook.host, config.webhook.port, config.webhook.path)
    server.serve_forever()
