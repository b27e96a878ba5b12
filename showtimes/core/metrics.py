"""Lightweight in-memory metrics collector."""

from __future__ import annotations

import threading
from collections import Counter
from dataclasses import dataclass
from typing import Dict


@dataclass
class MetricSnapshot:
    total_requests: int
    request_types: Dict[str, int]
    intents: Dict[str, int]


class MetricsCollector:
    """Thread-safe counter storage for basic skill metrics."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._total_requests = 0
        self._request_types: Counter[str] = Counter()
        self._intents: Counter[str] = Counter()

    def record_request(self, request_type: str, intent: str | None = None) -> None:
        with self._lock:
            self._total_requests += 1
            self._request_types[request_type] += 1
            if intent:
                self._intents[intent] += 1

    def snapshot(self) -> MetricSnapshot:
        with self._lock:
            return MetricSnapshot(
                total_requests=self._total_requests,
                request_types=dict(self._request_types),
                intents=dict(self._intents),
            )
