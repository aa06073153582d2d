"""Lambda entrypoint for the flag-gated greeting."""

from __future__ import annotations

from typing import Any
from typing import Mapping

from lambdakit.api.greeting import lambda_handler as _handler


def lambda_handler(event: Mapping[str, Any], context: Any) -> str:
    """Delegate to the greeting handler."""

    return _handler(event, context)
