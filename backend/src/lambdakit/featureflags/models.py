"""Pydantic schemas for AppConfig feature flag payloads."""

from __future__ import annotations

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import StrictBool
from pydantic import TypeAdapter
from pydantic import ValidationError

from lambdakit.exceptions import ParseError


class FeatureFlag(BaseModel):
    """A single flag: ``enabled`` plus whatever attributes the profile defines."""

    model_config = ConfigDict(extra="allow", frozen=True)

    enabled: StrictBool


FeatureFlags = dict[str, FeatureFlag]

_FLAGS_ADAPTER: TypeAdapter[FeatureFlags] = TypeAdapter(FeatureFlags)


def parse_feature_flags(content: bytes) -> FeatureFlags:
    """Parse a raw AppConfig payload into a flag mapping.

    Raises:
        ParseError: If the payload is not a JSON object of flag objects.
    """
    try:
        return _FLAGS_ADAPTER.validate_json(content)
    except ValidationError as exc:
        raise ParseError(detail=f"{exc.error_count()} validation error(s)") from exc


def flags_to_dict(flags: FeatureFlags) -> dict[str, dict]:
    """Return the flag mapping as plain JSON-compatible dicts."""
    return {name: flag.model_dump() for name, flag in flags.items()}
