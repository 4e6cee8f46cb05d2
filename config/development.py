import os

DATA_FILE = os.getenv("DATA_FILE", "data/data.json")

STORE_CONFIG = {
    "backend": os.getenv("STORE_BACKEND", "json"),
    "path": DATA_FILE,
}

# Multi-teacher mode: students belong to a teacher and every mark names a lesson.
MULTI_TEACHER = bool(int(os.getenv("MULTI_TEACHER", "1")))

PORT = int(os.getenv("PORT", "3000"))

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
