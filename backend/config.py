"""Application configuration via environment variables."""

import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

BASE_DIR = Path(__file__).resolve().parent

# Layout
PIXELS_PER_METER = float(os.getenv("PIXELS_PER_METER", "20"))
PACK_PROBE_LIMIT = int(os.getenv("PACK_PROBE_LIMIT", "50"))
PACK_COARSE_STEP_FROM = int(os.getenv("PACK_COARSE_STEP_FROM", "100"))

# Demo occupancy: a new seat starts occupied when random() > threshold
OCCUPANCY_THRESHOLD = float(os.getenv("OCCUPANCY_THRESHOLD", "0.7"))

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Server
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))

# CORS
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:5173,http://localhost:3000").split(",")
