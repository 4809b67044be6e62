"""Demo data loaded at startup when SEED_DEMO_DATA is enabled."""
from __future__ import annotations

from typing import Any

DEMO_LOCOMOTIVES: list[dict[str, Any]] = [
    {"id": 1, "series": "NS 1100", "category": "Elektrisch", "manufacturer": "Alsthom",
     "year_built": 1950, "track_gauge": 1435, "traction_code": "E", "max_speed": 130},
    {"id": 2, "series": "NS 1200", "category": "Elektrisch", "manufacturer": "Werkspoor/Heemaf/Baldwin-Westinghouse",
     "year_built": 1951, "track_gauge": 1435, "traction_code": "E", "max_speed": 150},
    {"id": 3, "series": "NS 1600", "category": "Elektrisch", "manufacturer": "Alsthom",
     "year_built": 1981, "track_gauge": 1435, "traction_code": "E", "max_speed": 160},
    {"id": 4, "series": "NS 1700", "category": "Elektrisch", "manufacturer": "Alsthom",
     "year_built": 1990, "track_gauge": 1435, "traction_code": "E", "max_speed": 160},
    {"id": 5, "series": "NS 2200", "category": "Diesel", "manufacturer": "Allan/EMD",
     "year_built": 1955, "track_gauge": 1435, "traction_code": "D", "max_speed": 100},
    {"id": 6, "series": "NS 2400", "category": "Diesel", "manufacturer": "Alsthom",
     "year_built": 1954, "track_gauge": 1435, "traction_code": "D", "max_speed": 90},
    {"id": 7, "series": "NS 6400", "category": "Diesel", "manufacturer": "MaK",
     "year_built": 1988, "track_gauge": 1435, "traction_code": "D", "max_speed": 120},
]
