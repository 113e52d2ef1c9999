import os


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return float(raw)


HOST = os.getenv("CHARTWHEEL_HOST", "127.0.0.1")
PORT = int(os.getenv("CHARTWHEEL_PORT", "8000"))
LOG_LEVEL = os.getenv("CHARTWHEEL_LOG", "warning")

# Default canvas for /api/chart/layout and /api/chart/svg
DEFAULT_CHART_SIZE = _env_float("CHARTWHEEL_CHART_SIZE", 300.0)
DEFAULT_CHART_MARGIN = _env_float("CHARTWHEEL_CHART_MARGIN", 2.0)

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CHARTWHEEL_CORS_ORIGINS", "*").split(",")
    if origin.strip()
]
