from app.models.weather import TempRanges, TempType

HOT_MIN_F = 89.5
MODERATE_MIN_F = 60.8


def classify(temp_f: float) -> TempType:
    """Bucket a Fahrenheit temperature. Both boundaries are inclusive on the warm side."""
    if temp_f >= HOT_MIN_F:
        return TempType.hot
    if temp_f >= MODERATE_MIN_F:
        return TempType.moderate
    return TempType.cold


def temp_ranges() -> TempRanges:
    return TempRanges(
        cold=f"≤{MODERATE_MIN_F - 0.1:.1f}°F",
        moderate=f"{MODERATE_MIN_F:.1f}-{HOT_MIN_F - 0.1:.1f}°F",
        hot=f"≥{HOT_MIN_F:.1f}°F",
    )
