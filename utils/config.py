from __future__ import annotations
import os
from dotenv import load_dotenv

# Load environment variables from .env if present
load_dotenv()

def _get_float(name: str, default: float) -> float:
	try:
		return float(os.getenv(name, default))
	except (TypeError, ValueError):
		return default

def _get_int(name: str, default: int) -> int:
	try:
		return int(float(os.getenv(name, default)))
	except (TypeError, ValueError):
		return default

def _get_service_level(name: str, default: float) -> float:
	level = _get_float(name, default)
	return level if 0 < level < 1 else default

def _get_optional_float(name: str) -> float | None:
	raw = os.getenv(name)
	if raw is None or not raw.strip():
		return None
	try:
		return float(raw)
	except ValueError:
		return None

# Fixed, not read from the environment
LOOKBACK_MONTHS = 24

DEFAULT_FORECAST_WINDOW = _get_int("FORECAST_WINDOW", 4)
if DEFAULT_FORECAST_WINDOW < 1:
	DEFAULT_FORECAST_WINDOW = 4
DEFAULT_SERVICE_LEVEL = _get_service_level("DEFAULT_SERVICE_LEVEL", 0.95)
# Overrides the z-score derived from DEFAULT_SERVICE_LEVEL when set
SAFETY_STOCK_Z = _get_optional_float("SAFETY_STOCK_Z")
LOW_CONFIDENCE_MONTHS = _get_int("LOW_CONFIDENCE_MONTHS", 3)

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
