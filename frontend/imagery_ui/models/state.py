from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, model_validator

from imagery_ui.models.result import ProcessingResult


class Phase(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    IN_FLIGHT = "in_flight"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class SubmissionState(BaseModel):
    """One immutable snapshot of the submission lifecycle.

    The controller replaces the whole snapshot on every change, so a reader
    holding a reference always sees a consistent phase/result/error triple.
    """

    model_config = ConfigDict(frozen=True)

    phase: Phase = Phase.IDLE
    input_url: str = ""
    persist_to_disk: bool = True
    result: Optional[ProcessingResult] = None
    error_message: Optional[str] = None
    request_token: int = 0

    @model_validator(mode="after")
    def _check_phase_payload(self) -> "SubmissionState":
        if (self.result is not None) != (self.phase is Phase.SUCCEEDED):
            raise ValueError(f"result must be set exactly when phase is succeeded (phase={self.phase.value})")
        if (self.error_message is not None) != (self.phase is Phase.FAILED):
            raise ValueError(f"error_message must be set exactly when phase is failed (phase={self.phase.value})")
        return self

    @property
    def in_flight(self) -> bool:
        return self.phase is Phase.IN_FLIGHT
