from typing import Dict


def init_metrics() -> Dict[str, int | float | dict]:
    return {
        'rooms_placed': 0,
        'room_attempts_failed': 0,
        'mazes_grown': 0,
        'regions': 0,
        'connector_candidates': 0,
        'connectors_opened': 0,
        'extra_connectors_opened': 0,
        'unmerged_regions': 0,
        'dead_ends_removed': 0,
        'dead_end_passes': 0,
        'runtime_ms': 0.0,
        'phase_ms': {},
    }
