"""Approximate beacon distance from signal strength."""

from __future__ import annotations


def estimate_distance(rssi: int, tx_power: int | None) -> float | None:
    """Return an approximate distance to the beacon, or None if unknown.

    Uses the empirical curve fitted for Android receivers; the result is a
    relative proximity figure rather than a calibrated measurement.
    """
    if rssi == 0 or not tx_power:
        return None

    ratio = rssi / tx_power
    if ratio < 1.0:
        return ratio**10 / 1000
    return (0.89976 * ratio**7.7095 + 0.111) / 1000
