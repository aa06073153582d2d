"""Feature flag retrieval from AWS AppConfig."""

from lambdakit.featureflags.models import (
    FeatureFlag,
    FeatureFlags,
    flags_to_dict,
    parse_feature_flags,
)
from lambdakit.featureflags.session import (
    ConfigurationSession,
    get_feature_flags,
)
from lambdakit.featureflags.settings import AppConfigTarget

__all__ = [
    "AppConfigTarget",
    "ConfigurationSession",
    "FeatureFlag",
    "FeatureFlags",
    "flags_to_dict",
    "get_feature_flags",
    "parse_feature_flags",
]
