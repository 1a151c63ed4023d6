from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Optional

import httpx

from mcdm.core import MCDMError, Payload, SubmissionError
from mcdm.grid import DecisionGrid
from mcdm.payload import build_payload
from models import RunConfig, SubmissionResult

logger = logging.getLogger(__name__)

RUN_PATH = "/mcdm/run"
GENERIC_ERROR = "Something went wrong"


def service_error_message(response: httpx.Response) -> str:
    """Pick the most useful error text out of a failed response."""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        detail = body.get("detail")
        if isinstance(detail, str) and detail:
            return detail
        if isinstance(detail, list):
            messages = [str(item.get("msg")) for item in detail if isinstance(item, dict) and item.get("msg")]
            if messages:
                return "; ".join(messages)
        for key in ("error", "message"):
            value = body.get(key)
            if isinstance(value, str) and value:
                return value
    return f"Request failed with status code {response.status_code}"


class RankingClient:
    """Client for the remote MCDM ranking service."""

    def __init__(
        self,
        base_url: str,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    async def run(self, payload: Payload) -> SubmissionResult:
        async with httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=self.transport,
        ) as client:
            try:
                response = await client.post(RUN_PATH, json=payload.to_dict())
                response.raise_for_status()
            except httpx.HTTPStatusError as exc:
                raise SubmissionError(
                    service_error_message(exc.response),
                    status_code=exc.response.status_code,
                ) from exc
            except httpx.HTTPError as exc:
                raise SubmissionError(str(exc) or GENERIC_ERROR) from exc

        try:
            data = response.json()
        except ValueError as exc:
            raise SubmissionError("Ranking service returned a response that is not JSON.") from exc
        if not isinstance(data, dict) or not isinstance(data.get("weights_used"), list):
            raise SubmissionError("Ranking service response is missing weights_used.")
        try:
            return SubmissionResult.from_dict(data)
        except (TypeError, ValueError) as exc:
            raise SubmissionError(f"Malformed ranking service response: {exc}") from exc


class SubmissionState(str, Enum):
    IDLE = "idle"
    PENDING = "pending"
    ERROR = "error"


class Submitter:
    """Single-slot submission guard: idle -> pending -> idle | error.

    Only one request may be outstanding. A call to ``submit`` made while a
    request is pending returns ``False`` and issues nothing, so responses are
    always applied in the order their requests were sent.
    """

    def __init__(
        self,
        client: RankingClient,
        on_change: Optional[Callable[[], None]] = None,
    ) -> None:
        self.client = client
        self.on_change = on_change
        self.state = SubmissionState.IDLE
        self.result: Optional[SubmissionResult] = None
        self.error = ""

    @property
    def busy(self) -> bool:
        return self.state is SubmissionState.PENDING

    async def submit(self, grid: DecisionGrid, config: RunConfig) -> bool:
        if self.busy:
            logger.debug("Submission ignored, a request is already pending")
            return False
        self.result = None
        self.error = ""
        try:
            payload = build_payload(grid, config)
        except MCDMError as exc:
            self._fail(exc)
            return True

        rows, columns = grid.shape
        logger.info("Submitting %dx%d matrix (method=%s)", rows, columns, payload.method)
        self._set_state(SubmissionState.PENDING)
        try:
            result = await self.client.run(payload)
        except MCDMError as exc:
            self._fail(exc)
        else:
            self.result = result
            logger.info("Ranking service answered with %d weights", len(result.weights_used))
            self._set_state(SubmissionState.IDLE)
        finally:
            # unexpected errors propagate but must not leave the guard stuck
            if self.busy:
                self.error = GENERIC_ERROR
                self._set_state(SubmissionState.ERROR)
        return True

    def _fail(self, exc: MCDMError) -> None:
        self.error = str(exc) or GENERIC_ERROR
        logger.warning("Submission failed: %s", self.error)
        self._set_state(SubmissionState.ERROR)

    def _set_state(self, state: SubmissionState) -> None:
        self.state = state
        if self.on_change is not None:
            self.on_change()
