"""
Region click vs. bare map click disambiguation

Region polygons sit on the same click surface as the base map, so a region
click is followed by a map click. Map clicks inside the debounce window are
dropped.
"""

import logging
import time
from typing import Callable, Optional

CLICK_DEBOUNCE_MS = 500

Clock = Callable[[], float]

def monotonic_ms() -> float:
    return time.monotonic() * 1000.0

class ClickArbiter:
    """Remembers the last region click and gates map clicks against it"""

    def __init__(self, clock: Clock = monotonic_ms, last_region_click_ms: Optional[float] = None):
        self.clock = clock
        self.last_region_click_ms = last_region_click_ms
        self.logger = logging.getLogger(__name__)

    def register_region_click(self, now_ms: Optional[float] = None) -> float:
        self.last_region_click_ms = self.clock() if now_ms is None else now_ms
        return self.last_region_click_ms

    def should_handle_map_click(self, now_ms: Optional[float] = None) -> bool:
        if self.last_region_click_ms is None:
            return True

        now_ms = self.clock() if now_ms is None else now_ms
        if now_ms - self.last_region_click_ms < CLICK_DEBOUNCE_MS:
            self.logger.info("🚫 Ignoring map click due to recent region click")
            return False
        return True
