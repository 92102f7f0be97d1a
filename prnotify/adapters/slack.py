"""Slack Web API adapter."""

from typing import Any, Dict

import requests

from prnotify.adapters.base import ChatAdapter, ChatPlatformError


class SlackAdapter(ChatAdapter):
    """Slack Web API implementation (users.lookupByEmail, chat.postMessage)."""

    def __init__(self, token: str, api_url: str = "https://slack.com/api") -> None:
        self._api_url = api_url.rstrip("/")
        self._session = requests.Session()
        self._session.headers["Authorization"] = f"Bearer {token}"

    def _request(
        self,
        method: str,
        api_method: str,
        params: Dict[str, Any] | None = None,
        json: Dict[str, Any] | None = None,
    ) -> Dict[str, Any]:
        url = f"{self._api_url}/{api_method}"
        try:
            resp = self._session.request(method, url, params=params, json=json, timeout=30)
        except requests.RequestException as e:
            raise ChatPlatformError(f"{api_method}: {e}") from e
        if resp.status_code >= 400:
            raise ChatPlatformError(f"{api_method}: {resp.status_code}: {resp.text or resp.reason}")
        try:
            data = resp.json()
        except ValueError as e:
            raise ChatPlatformError(f"{api_method}: invalid JSON response") from e
        # Slack reports most failures as 200 with ok=false
        if not data.get("ok"):
            raise ChatPlatformError(f"{api_method}: {data.get('error', 'unknown_error')}")
        return data

    def lookup_user_id(self, email: str) -> str:
        data = self._request("GET", "users.lookupByEmail", params={"email": email})
        user = data.get("user") or {}
        user_id = user.get("id")
        if not user_id:
            raise ChatPlatformError(f"users.lookupByEmail: no user id for {email}")
        return user_id

    def post_direct_message(self, user_id: str, text: str) -> None:
        # Posting to a user ID delivers to the app's DM with that user
        self._request("POST", "chat.postMessage", json={"channel": user_id, "text": text})
