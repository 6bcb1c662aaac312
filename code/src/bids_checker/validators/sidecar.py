"""Validation of JSON sidecar files."""

import json
import logging
from typing import Any, Optional

from bids_checker.models import FileRef, Issue

logger = logging.getLogger(__name__)


def validate_json(file: FileRef, contents: str) -> tuple[list[Issue], Optional[dict[str, Any]]]:
    """Parse a JSON sidecar and sanity-check its timing fields.

    Timing fields must be expressed in seconds; implausibly large values are
    reported as warnings.

    Args:
        file: The JSON file
        contents: File contents

    Returns:
        Tuple of (issues, parsed object or None when the file is not a JSON object)
    """
    try:
        data = json.loads(contents)
    except (json.JSONDecodeError, RecursionError) as e:
        logger.debug(f"Invalid JSON in {file.relative_path}: {e}")
        return [Issue(code=27, file=file, evidence=str(e))], None

    if not isinstance(data, dict):
        return [Issue(code=27, file=file, evidence="top-level value is not an object")], None

    issues = []
    repetition_time = _number(data, "RepetitionTime")
    if repetition_time is not None and repetition_time > 100:
        issues.append(Issue(code=2, file=file, evidence=f"RepetitionTime: {repetition_time}"))

    echo_time = _number(data, "EchoTime")
    if echo_time is not None and echo_time > 1:
        issues.append(Issue(code=3, file=file, evidence=f"EchoTime: {echo_time}"))

    echo_time1 = _number(data, "EchoTime1")
    echo_time2 = _number(data, "EchoTime2")
    if echo_time1 is not None and echo_time2 is not None and abs(echo_time1 - echo_time2) > 1:
        issues.append(
            Issue(
                code=4,
                file=file,
                evidence=f"EchoTime1: {echo_time1}, EchoTime2: {echo_time2}",
            )
        )

    total_readout_time = _number(data, "TotalReadoutTime")
    if total_readout_time is not None and total_readout_time > 10:
        issues.append(
            Issue(code=5, file=file, evidence=f"TotalReadoutTime: {total_readout_time}")
        )

    return issues, data


def _number(data: dict[str, Any], key: str) -> Optional[float]:
    value = data.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)
