"""Lambda entrypoint for the feature flags endpoint."""

from __future__ import annotations

from typing import Any
from typing import Mapping

from lambdakit.api.feature_flags import lambda_handler as _handler


def lambda_handler(event: Mapping[str, Any], context: Any) -> dict[str, Any]:
    """Delegate to the feature flags handler."""

    return _handler(event, context)
