from __future__ import annotations

from typing import Any

REDACTED = "***"
SECRET_KEYS = frozenset({"password", "newpass"})


def redact_params(params: Any) -> Any:
    if isinstance(params, dict):
        return {
            k: (REDACTED if k in SECRET_KEYS and v else redact_params(v))
            for k, v in params.items()
        }
    if isinstance(params, (list, tuple)):
        return [redact_params(item) for item in params]
    return params
