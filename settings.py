import os
from typing import List
from dotenv import load_dotenv

load_dotenv()

# Optional JSON sport catalogue; the embedded catalogue is used when unset
SPORT_CATALOGUE_PATH = os.getenv("SPORTFIT_CATALOGUE_PATH") or None

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def _split_origins(raw: str) -> List[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


CORS_ALLOW_ORIGINS = _split_origins(os.getenv("CORS_ALLOW_ORIGINS", "*"))
