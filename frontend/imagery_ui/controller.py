import asyncio
import logging
from typing import Awaitable, Callable, Dict, FrozenSet, Optional, Protocol

from imagery_ui.models.errors import (
    EmptyUrlError,
    InvalidTransitionError,
    RequestTimeoutError,
    SubmissionError,
)
from imagery_ui.models.result import ProcessingResult, serialize_result
from imagery_ui.models.state import Phase, SubmissionState

logger = logging.getLogger(__name__)

FALLBACK_ERROR = "Something went wrong."

TRANSITIONS: Dict[Phase, FrozenSet[Phase]] = {
    Phase.IDLE: frozenset({Phase.VALIDATING}),
    Phase.VALIDATING: frozenset({Phase.IN_FLIGHT, Phase.FAILED}),
    # A resubmission while in flight supersedes the pending call.
    Phase.IN_FLIGHT: frozenset({Phase.SUCCEEDED, Phase.FAILED, Phase.VALIDATING}),
    Phase.SUCCEEDED: frozenset({Phase.VALIDATING}),
    Phase.FAILED: frozenset({Phase.VALIDATING}),
}


class ResultSource(Protocol):
    def process(self, youtube_url: str, save: bool) -> ProcessingResult: ...


class SubmissionController:
    """Owns the submission lifecycle and is its only writer.

    ``begin_submit`` runs validation synchronously and hands back the pending
    outbound call (or ``None`` when validation failed); ``submit`` does both.
    Every call carries a request token, and a response whose token is no
    longer current is dropped instead of overwriting newer state.
    """

    def __init__(self, client: ResultSource, timeout: float, persist_to_disk: bool = True):
        self.client = client
        self.timeout = timeout
        self._state = SubmissionState(persist_to_disk=persist_to_disk)
        self._next_token = 0

    # -- queries -------------------------------------------------------

    @property
    def state(self) -> SubmissionState:
        return self._state

    @property
    def phase(self) -> Phase:
        return self._state.phase

    @property
    def result(self) -> Optional[ProcessingResult]:
        return self._state.result

    @property
    def error(self) -> Optional[str]:
        return self._state.error_message

    @property
    def url(self) -> str:
        return self._state.input_url

    @property
    def persist(self) -> bool:
        return self._state.persist_to_disk

    @property
    def can_submit(self) -> bool:
        return self._state.phase is not Phase.IN_FLIGHT

    # -- user actions --------------------------------------------------

    def set_url(self, text: str) -> None:
        self._state = self._state.model_copy(update={"input_url": text})

    def set_persist(self, flag: bool) -> None:
        self._state = self._state.model_copy(update={"persist_to_disk": bool(flag)})

    async def submit(self) -> None:
        pending = self.begin_submit()
        if pending is not None:
            await pending

    def begin_submit(self) -> Optional[Awaitable[None]]:
        self._transition(Phase.VALIDATING)

        url = self._state.input_url.strip()
        if not url:
            self._fail(EmptyUrlError())
            return None

        self._next_token += 1
        token = self._next_token
        self._transition(Phase.IN_FLIGHT, request_token=token)
        logger.info("Submitting %s (save=%s, token=%d)", url, self._state.persist_to_disk, token)
        return self._run(token, url, self._state.persist_to_disk)

    def result_text(self) -> Optional[str]:
        if self._state.result is None:
            return None
        return serialize_result(self._state.result)

    def copy_result(self, write: Callable[[str], None]) -> bool:
        text = self.result_text()
        if text is None:
            return False
        write(text)
        return True

    # -- internals -----------------------------------------------------

    async def _run(self, token: int, url: str, save: bool) -> None:
        try:
            result = await asyncio.wait_for(
                asyncio.to_thread(self.client.process, url, save),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError:
            outcome = RequestTimeoutError(self.timeout)
        except Exception as e:
            outcome = e
        else:
            outcome = result

        if token != self._state.request_token or self._state.phase is not Phase.IN_FLIGHT:
            logger.info("Discarding stale response for token %d (current %d)", token, self._state.request_token)
            return

        if isinstance(outcome, ProcessingResult):
            logger.info("Token %d succeeded with %d product(s)", token, len(outcome.product_list))
            self._transition(Phase.SUCCEEDED, result=outcome)
        else:
            self._fail(outcome)

    def _fail(self, error: BaseException) -> None:
        if not isinstance(error, SubmissionError):
            logger.error("Unexpected error during submission", exc_info=error)
        message = str(error).strip() or FALLBACK_ERROR
        logger.warning("Submission failed: %s", message)
        self._transition(Phase.FAILED, error_message=message)

    def _transition(self, target: Phase, **fields) -> None:
        current = self._state.phase
        if target not in TRANSITIONS[current]:
            raise InvalidTransitionError(f"Illegal transition {current.value} -> {target.value}")

        previous = self._state
        self._state = SubmissionState(
            phase=target,
            input_url=previous.input_url,
            persist_to_disk=previous.persist_to_disk,
            request_token=fields.get("request_token", previous.request_token),
            result=fields.get("result"),
            error_message=fields.get("error_message"),
        )
        logger.debug("Phase %s -> %s", current.value, target.value)
