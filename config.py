import os

# Ranking service
API_BASE = os.getenv("MCDM_API_BASE", "https://mcdm-backend.onrender.com")
# Empty or unset means the request waits as long as the service takes
_timeout = os.getenv("MCDM_REQUEST_TIMEOUT", "").strip()
REQUEST_TIMEOUT = float(_timeout) if _timeout else None

# NiceGUI server
HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "8080"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FILE = os.getenv("LOG_FILE") or None
