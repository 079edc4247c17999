import os
from pathlib import Path

DEFAULT_ORIGINS = "http://localhost:8080,http://localhost:1234,https://movies.com,https://midu.dev"

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "1234"))

ALLOWED_ORIGINS = [
    origin.strip() for origin in os.getenv("ALLOWED_ORIGINS", DEFAULT_ORIGINS).split(",") if origin.strip()
]
# reject disallowed origins with 403 instead of only omitting the CORS headers
CORS_STRICT = os.getenv("CORS_STRICT", "true").lower() == "true"

SEED_PATH = Path(os.getenv("MOVIES_SEED_PATH", Path(__file__).parent / "data" / "movies.json"))
