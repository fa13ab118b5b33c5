from __future__ import annotations

from bedtime.models import NightStats

WARM_AVG_C = 24.0
WARM_MAX_C = 26.0
HUMID_AVG_PCT = 70.0
HUMID_MAX_PCT = 80.0

BASE_NOTE = "Conditions look reasonable for sleep."
WARM_NOTE = "It may feel warm overnight. A fan or lighter bedding might help."
HUMID_NOTE = " Humidity is also fairly high, which can make sleep feel sticky."


def classify(stats: NightStats) -> str:
    """Comfort note for the night; warm replaces the base, humid appends."""
    note = BASE_NOTE
    if stats.avg_temp > WARM_AVG_C or stats.max_temp > WARM_MAX_C:
        note = WARM_NOTE
    if stats.avg_humidity > HUMID_AVG_PCT or stats.max_humidity > HUMID_MAX_PCT:
        note += HUMID_NOTE
    return note
