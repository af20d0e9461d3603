from __future__ import annotations

import math
from numbers import Integral, Real
from typing import Any, Dict, List, Sequence

from marketing_browser.core.dataset import RECORD_FIELDS, Record
from marketing_browser.validation.errors import ValidationError, ValidationIssue

COUNT_FIELDS = ("impressions", "clicks", "conversions")
LABEL_FIELDS = ("channel", "region")


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _check_record(idx: int, raw: Any) -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []

    if not isinstance(raw, dict):
        return [ValidationIssue("RECORD_NOT_OBJECT", f"expected an object, got {type(raw).__name__}", idx)]

    missing = [f for f in RECORD_FIELDS if f not in raw]
    if missing:
        issues.append(ValidationIssue("RECORD_MISSING_FIELDS", f"missing {', '.join(missing)}", idx))

    if "id" in raw and (raw["id"] is None or isinstance(raw["id"], (bool, dict, list))):
        issues.append(ValidationIssue("RECORD_ID", f"invalid id {raw['id']!r}", idx))

    for name in LABEL_FIELDS:
        if name in raw and not (isinstance(raw[name], str) and raw[name]):
            issues.append(ValidationIssue("RECORD_LABEL", f"{name} must be a non-empty string", idx))

    if "spend" in raw:
        spend = raw["spend"]
        if not _is_number(spend) or not math.isfinite(spend) or spend < 0:
            issues.append(ValidationIssue("RECORD_SPEND", f"spend must be a non-negative number, got {spend!r}", idx))

    for name in COUNT_FIELDS:
        if name not in raw:
            continue
        value = raw[name]
        integral = isinstance(value, Integral) or (_is_number(value) and math.isfinite(value) and float(value).is_integer())
        if not _is_number(value) or not integral or value < 0:
            issues.append(ValidationIssue("RECORD_COUNT", f"{name} must be a non-negative integer, got {value!r}", idx))

    return issues


def build_records(raw_records: Sequence[Any]) -> List[Record]:
    """
    Validate raw record objects and turn them into Records.

    Every problem is collected before raising, so one ValidationError describes the
    whole file.

    :raises ValidationError: if any entry is malformed or ids repeat.
    """
    issues: List[ValidationIssue] = []
    seen_ids: Dict[Any, int] = {}

    for idx, raw in enumerate(raw_records):
        record_issues = _check_record(idx, raw)
        issues.extend(record_issues)
        if record_issues or not isinstance(raw, dict):
            continue

        rid = raw["id"]
        if rid in seen_ids:
            issues.append(
                ValidationIssue("RECORD_DUPLICATE_ID", f"id {rid!r} already used by record {seen_ids[rid]}", idx)
            )
        else:
            seen_ids[rid] = idx

    if issues:
        raise ValidationError(issues)

    return [
        Record(
            id=raw["id"],
            channel=raw["channel"],
            region=raw["region"],
            spend=float(raw["spend"]),
            impressions=int(raw["impressions"]),
            clicks=int(raw["clicks"]),
            conversions=int(raw["conversions"]),
        )
        for raw in raw_records
    ]
