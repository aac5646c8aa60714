"""Thread-safe polar grid of radar detections."""

from __future__ import annotations

import math
import threading
import time

_LONG_AGO_S = 3600.0


class RadarModel:
    """Polar grid of cells that remembers when each cell was last hit.

    The grid has ``angular`` sectors around the full circle and ``radial``
    rings from the centre to the edge. Producers add detections and set the
    sweep angle. Consumers read the age of each cell's last hit.
    """

    def __init__(self, angular: int = 30, radial: int = 4) -> None:
        self._angular_res = angular
        self._radial_res = radial
        self._sweep_deg = 0.0
        self._lock = threading.Lock()
        long_ago = time.monotonic() - _LONG_AGO_S
        self._cell_last_hit = [long_ago] * (angular * radial)

    @property
    def angular_res(self) -> int:
        """Number of angular sectors."""
        return self._angular_res

    @property
    def radial_res(self) -> int:
        """Number of radial rings."""
        return self._radial_res

    @property
    def sweep_angle(self) -> float:
        """Current sweep angle in degrees."""
        with self._lock:
            return self._sweep_deg

    @sweep_angle.setter
    def sweep_angle(self, deg: float) -> None:
        with self._lock:
            self._sweep_deg = float(deg)

    def add_detection(self, deg: float, dist: float) -> None:
        """Mark the cell at angle ``deg`` and normalised distance ``dist`` as hit now.

        The distance is clamped to [0, 1], where 1 is the edge of the radar.
        Angles wrap every 360 degrees; a detection that maps outside the grid
        is ignored.
        """
        if not math.isfinite(deg):
            return
        with self._lock:
            normalized = min(1.0, max(0.0, dist))
            angular_idx = int(math.fmod(deg, 360.0) / 360.0 * self._angular_res)
            radial_idx = min(int(normalized * self._radial_res), self._radial_res - 1)
            if angular_idx < 0 or radial_idx < 0:
                return
            cell = angular_idx * self._radial_res + radial_idx
            if cell < len(self._cell_last_hit):
                self._cell_last_hit[cell] = time.monotonic()

    def cell_hit_times(self) -> list[float]:
        """Seconds since each cell was last hit, with millisecond resolution."""
        with self._lock:
            now = time.monotonic()
            return [int((now - hit) * 1000) / 1000.0 for hit in self._cell_last_hit]

    def clear_hits(self) -> None:
        """Forget every hit by moving all cells back to a long time ago."""
        with self._lock:
            long_ago = time.monotonic() - _LONG_AGO_S
            self._cell_last_hit = [long_ago] * len(self._cell_last_hit)

    def change_resolution(self, angular: int, radial: int) -> None:
        """Report a requested resolution change; the grid itself is kept as is."""
        print(f"RadarModel::change_resolution({angular}, {radial})")