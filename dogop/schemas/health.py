from datetime import datetime

from pydantic import BaseModel

STATUS_OK = "OK"
STATUS_UNAVAILABLE = "Unavailable"


class HealthCheck(BaseModel):
    """Readiness report. `failures` maps check name to error detail."""

    status: str
    timestamp: datetime
    failures: dict[str, str] | None = None
