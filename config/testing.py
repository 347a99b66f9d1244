from .config import *  # noqa: F401,F403

SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True

FRI_SAT_EMPLOYEES = []
LOG_LEVEL = "WARNING"
