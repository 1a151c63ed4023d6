from mcdm.client import RankingClient, SubmissionState, Submitter
from mcdm.core import MCDMError, Payload, SubmissionError, ValidationError
from mcdm.grid import DecisionGrid
from mcdm.payload import build_payload
from mcdm.render import RenderedResult, render_result

METHODS = {
    "topsis": "TOPSIS only",
    "mairca": "MAIRCA only",
    "all": "Both (TOPSIS + MAIRCA)",
}


def get_method(method_id: str) -> str:
    return method_id if method_id in METHODS else "all"


def list_methods() -> dict:
    return dict(METHODS)
