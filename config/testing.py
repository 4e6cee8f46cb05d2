STORE_CONFIG = {
    "backend": "memory",
}

MULTI_TEACHER = True

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
