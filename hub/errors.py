from __future__ import annotations

import json
from typing import Any, Dict, List, Tuple

INVALID_INPUT_BODY = {"error": "Invalid input."}


class ValidationNormalizeMiddleware:
    """Normalize FastAPI 422 validation responses into 400 with a short error body."""

    def __init__(self, app: Any) -> None:
        self.app = app

    async def __call__(self, scope: Dict[str, Any], receive: Any, send: Any) -> None:
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        rewriting = False
        headers: List[Tuple[bytes, bytes]] = []

        async def send_wrapper(message: Dict[str, Any]) -> None:
            nonlocal rewriting, headers
            if message["type"] == "http.response.start":
                if message.get("status") != 422:
                    await send(message)
                    return
                rewriting = True
                headers = [
                    (key, value)
                    for key, value in message.get("headers", [])
                    if key.lower() not in {b"content-length", b"content-type"}
                ]
                return

            if not rewriting:
                await send(message)
                return

            if message["type"] == "http.response.body" and message.get("more_body"):
                return

            payload = json.dumps(INVALID_INPUT_BODY).encode("utf-8")
            headers.append((b"content-type", b"application/json"))
            headers.append((b"content-length", str(len(payload)).encode("latin-1")))
            await send(
                {
                    "type": "http.response.start",
                    "status": 400,
                    "headers": headers,
                }
            )
            await send({"type": "http.response.body", "body": payload})

        await self.app(scope, receive, send_wrapper)
