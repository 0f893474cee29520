"""Fire-and-forget play telemetry."""
import json
import logging
import threading
from typing import Any, Dict, List, Tuple
from urllib.request import Request, urlopen

logger = logging.getLogger(__name__)


class NullTelemetry:
    """Telemetry sink that only writes to the debug log."""

    def log_event(self, game_name: str, fields: Dict[str, Any]) -> None:
        logger.debug("telemetry %s %s", game_name, fields)


class RecordingTelemetry:
    """Keeps every event in memory; handy for tests and replays."""

    def __init__(self):
        self.events: List[Tuple[str, Dict[str, Any]]] = []

    def log_event(self, game_name: str, fields: Dict[str, Any]) -> None:
        self.events.append((game_name, dict(fields)))

    def actions(self) -> List[str]:
        return [fields.get("action") for _, fields in self.events]


class HttpTelemetry:
    """Posts events as JSON to ``url`` from a background thread.

    The caller never waits for the request and never sees its failure;
    errors are logged from the worker thread.
    """

    def __init__(self, url: str, timeout: float = 5.0):
        self.url = url
        self.timeout = timeout
        self._threads: List[threading.Thread] = []

    def _encode(self, game_name: str, fields: Dict[str, Any]) -> bytes:
        return json.dumps({"game_name": game_name, "payload": fields}).encode("utf-8")

    def _send(self, body: bytes) -> None:
        req = Request(self.url, data=body, method="POST",
                      headers={"Content-Type": "application/json"})
        try:
            with urlopen(req, timeout=self.timeout) as resp:
                resp.read()
        except Exception:
            logger.warning("Telemetry post to %s failed", self.url, exc_info=True)

    def log_event(self, game_name: str, fields: Dict[str, Any]) -> None:
        body = self._encode(game_name, fields)
        thread = threading.Thread(target=self._send, args=(body,), daemon=True)
        thread.start()
        self._threads = [t for t in self._threads if t.is_alive()]
        self._threads.append(thread)

    def flush(self, timeout: float = None) -> None:
        """Wait for in-flight posts; used at shutdown and in tests."""
        for t in list(self._threads):
            t.join(timeout)
        self._threads = [t for t in self._threads if t.is_alive()]


__all__ = ["NullTelemetry", "RecordingTelemetry", "HttpTelemetry"]
