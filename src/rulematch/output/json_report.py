"""JSON reporter for scripts and pipelines."""

from __future__ import annotations

import json
from typing import Any, Dict, List

from rulematch.output.models import CheckResult


def to_dict(result: CheckResult) -> Dict[str, Any]:
    """Convert CheckResult to a JSON-serialisable dict."""
    results_list: List[Dict[str, Any]] = []
    for r in result.results:
        results_list.append({
            "value": r.value,
            "matched": r.matched,
            **({"rule": {"type": r.rule.type, "pattern": r.rule.pattern}} if r.rule else {}),
        })

    return {
        "version": "1.0",
        "rule_count": result.rule_count,
        "total": len(result.results),
        "matched": len(result.matched),
        "all_matched": result.all_matched,
        "results": results_list,
    }


def render(result: CheckResult) -> str:
    """Return formatted JSON string."""
    return json.dumps(to_dict(result), indent=2, default=str)
