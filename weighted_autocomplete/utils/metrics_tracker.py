# metrics_tracker.py

import json
import logging
import os
from collections import defaultdict

from rich.console import Console

logger = logging.getLogger(__name__)


class Metrics:
    """Running sums/counts per key, e.g. query latency. path=None keeps it in memory."""

    def __init__(self, path=None):
        self.path = path
        self.m = defaultdict(float)
        self.n = defaultdict(int)
        self._load()

    def _load(self):
        if self.path and os.path.exists(self.path):
            try:
                with open(self.path, "r", encoding="utf8") as f:
                    d = json.load(f)
                for k, v in d.items():
                    self.m[k] = float(v["sum"])
                    self.n[k] = int(v["count"])
            except (OSError, ValueError, TypeError, KeyError, AttributeError) as e:
                logger.warning("metrics %s unreadable, starting fresh: %s", self.path, e)
                self.m.clear()
                self.n.clear()

    def save(self):
        if not self.path:
            return
        d = {k: {"sum": self.m[k], "count": self.n[k]} for k in self.m}
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(d, f, indent=2)

    def record(self, key, val):
        self.m[key] += val
        self.n[key] += 1

    def avg(self, key):
        if self.n[key] == 0: return 0.0
        return self.m[key] / self.n[key]

    def show(self, console: Console = None):
        console = console or Console()
        console.print("[bold]metrics:[/bold]")
        for k in sorted(self.m):
            console.print(f"  {k:15} {self.avg(k) * 1000:.3f} ms  (n={self.n[k]})")
