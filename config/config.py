import os


def _names(value: str) -> list[str]:
    """Comma separated names -> list, blanks dropped."""
    return [n.strip() for n in value.split(",") if n.strip()]


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "timesheet-reports-dev"

    MAX_UPLOAD_MB = int(os.environ.get("MAX_UPLOAD_MB", "16"))
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

    # Employees whose weekly rest is Friday and Saturday (request may add more)
    FRI_SAT_EMPLOYEES = _names(os.environ.get("FRI_SAT_EMPLOYEES", ""))

    ANNUAL_LEAVE_CODE = os.environ.get("ANNUAL_LEAVE_CODE", "A/L")
    ANNUAL_LEAVE_PHRASE = os.environ.get("ANNUAL_LEAVE_PHRASE", "annual leave")


SECRET_KEY = Config.SECRET_KEY
MAX_UPLOAD_MB = Config.MAX_UPLOAD_MB
LOG_LEVEL = Config.LOG_LEVEL
FRI_SAT_EMPLOYEES = Config.FRI_SAT_EMPLOYEES
ANNUAL_LEAVE_CODE = Config.ANNUAL_LEAVE_CODE
ANNUAL_LEAVE_PHRASE = Config.ANNUAL_LEAVE_PHRASE

DEBUG = bool(int(os.environ.get("DEBUG", "1")))
