# Todo list: event emitter
#
# Forwards bridge events to an HTTP endpoint (if configured) or appends
# them to a local JSONL file. Failed posts wait in a bounded retry queue.

import json
import logging
import time
from collections import deque
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Dict, Any

import requests

from .config import DEFAULT_JSONL_PATH

logger = logging.getLogger(__name__)


def build_payload(event_type: str, **kwargs) -> Dict[str, Any]:
    """Flatten a bridge event into a JSON-serializable dict."""
    payload: Dict[str, Any] = {
        "event_type": event_type,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
    for key, value in kwargs.items():
        if hasattr(value, "to_dict"):
            value = value.to_dict()
        payload[key] = value
    return payload


class TodoEventEmitter:
    """
    Subscriber that ships events out of process. Never raises.

    Attach with bridge.subscribe_all(emitter).
    """

    def __init__(self, url: Optional[str] = None, jsonl_path: str = DEFAULT_JSONL_PATH):
        self.url = url
        self.jsonl_path = Path(jsonl_path).expanduser()
        self.retry_queue = deque(maxlen=1000)  # (payload, first_try_time)

    def __call__(self, event_type: str, **kwargs) -> None:
        self.emit(build_payload(event_type, **kwargs))

    def emit(self, payload: Dict[str, Any]) -> None:
        """Post to the endpoint if configured, otherwise write JSONL."""
        try:
            data = json.dumps(payload)
        except (TypeError, ValueError) as e:
            logger.error(f"Dropping unserializable {payload.get('event_type')} event: {e}")
            return

        if self.url:
            if self._post(data):
                self.flush_retry_queue()
                return
            self.retry_queue.append((data, time.time()))

        self._write_jsonl(data)

    def flush_retry_queue(self) -> int:
        """Resend queued payloads in order. Stops at the first failure."""
        sent = 0
        while self.retry_queue:
            data, _ = self.retry_queue[0]
            if not self._post(data):
                break
            self.retry_queue.popleft()
            sent += 1
        return sent

    def _post(self, data: str) -> bool:
        try:
            r = requests.post(
                self.url,
                data=data,
                headers={"Content-Type": "application/json"},
                timeout=2,
            )
        except requests.RequestException as e:
            logger.warning(f"Event post to {self.url} failed: {e}")
            return False
        if not r.ok:
            logger.warning(f"Event post to {self.url} returned {r.status_code}")
        return r.ok

    def _write_jsonl(self, data: str) -> None:
        """Append a JSON line to the fallback log file."""
        try:
            self.jsonl_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.jsonl_path, "a") as f:
                f.write(data + "\n")
        except OSError as e:
            logger.warning(f"JSONL write error: {e}")
