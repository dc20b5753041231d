"""
JSON line codec for persisted contest results.

Each record is one JSON object with exactly four keys, matching ContestResult.
"""

import json

from pydantic import ConfigDict, StrictInt, StrictStr, TypeAdapter, with_config
from pydantic import ValidationError as PydanticValidationError
from typing_extensions import TypedDict

from ..exceptions import CorruptRecordError, ValidationError
from ..models import ContestResult


@with_config(ConfigDict(extra="forbid"))
class ResultRecord(TypedDict):
    """Type definition for one persisted result line."""

    Contestant1Name: StrictStr
    Contestant1Score: StrictInt
    Contestant2Name: StrictStr
    Contestant2Score: StrictInt


_record_adapter = TypeAdapter(ResultRecord)


def serialize_result(result: ContestResult) -> str:
    """Serialize a contest result to a single JSON line (no trailing newline)."""
    record: ResultRecord = {
        "Contestant1Name": result.contestant1_name,
        "Contestant1Score": result.contestant1_score,
        "Contestant2Name": result.contestant2_name,
        "Contestant2Score": result.contestant2_score,
    }
    return json.dumps(record, ensure_ascii=False)


def deserialize_result(line: str, line_number: int = 1) -> ContestResult:
    """
    Deserialize one JSON line into a contest result.

    Raises:
        CorruptRecordError: If the line is not a valid result record
    """
    try:
        record = _record_adapter.validate_python(json.loads(line))
        return ContestResult(
            contestant1_name=record["Contestant1Name"],
            contestant1_score=record["Contestant1Score"],
            contestant2_name=record["Contestant2Name"],
            contestant2_score=record["Contestant2Score"],
        )
    except json.JSONDecodeError as e:
        raise CorruptRecordError(f"not valid JSON ({e.msg})", line_number) from e
    except PydanticValidationError as e:
        raise CorruptRecordError(
            f"{e.error_count()} field error(s): {e.errors()[0]['msg']}", line_number
        ) from e
    except ValidationError as e:
        raise CorruptRecordError(str(e), line_number) from e
