"""Submission gateway — the one network exchange with the review service.

A single POST, no retry, no caching. Every way the exchange can go wrong
(transport error, non-2xx status, unparseable body) surfaces as one
SubmissionError whose message is safe to show to the user as-is.
"""

from __future__ import annotations

import logging

import requests

from revsight_core.models import ReviewResult, SubmissionRequest

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "https://automated-code-review-woa.onrender.com/review"

_ERROR_PREFIX = "Failed to fetch"


class SubmissionError(Exception):
    """Raised when a submission produced no usable ReviewResult."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


def submit(
    request: SubmissionRequest,
    endpoint: str = DEFAULT_ENDPOINT,
    session: requests.Session | None = None,
    timeout: float | None = None,
) -> ReviewResult:
    """POST the request to the review service and return its parsed result.

    The request is not validated here; callers run validate_request() first.
    ``timeout=None`` waits indefinitely.
    """
    http = session if session is not None else requests.Session()
    logger.debug("Submitting review request for %s/%s to %s", request.owner, request.repo, endpoint)

    try:
        response = http.post(
            endpoint,
            json=request.to_payload(),
            headers={"Content-Type": "application/json"},
            timeout=timeout,
        )
    except requests.RequestException as e:
        logger.warning("Review request failed (%s): %s", type(e).__name__, e)
        raise SubmissionError(f"{_ERROR_PREFIX}: {e}") from e
    finally:
        if session is None:
            http.close()

    if not response.ok:
        logger.warning("Review service returned HTTP %d", response.status_code)
        raise SubmissionError(
            f"{_ERROR_PREFIX}: HTTP error! status: {response.status_code}",
            status_code=response.status_code,
        )

    try:
        return ReviewResult.from_dict(response.json())
    except (ValueError, TypeError) as e:
        # requests' JSONDecodeError subclasses ValueError.
        logger.warning("Could not parse review service response: %s", e)
        raise SubmissionError(f"{_ERROR_PREFIX}: {e}", status_code=response.status_code) from e
