import os

DATA_FILE = os.getenv("DATA_FILE", "data/data.json")

STORE_CONFIG = {
    "backend": "json",
    "path": DATA_FILE,
}

MULTI_TEACHER = bool(int(os.getenv("MULTI_TEACHER", "1")))

PORT = int(os.getenv("PORT", "3000"))

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
