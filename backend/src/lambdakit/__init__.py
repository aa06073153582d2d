"""Lambda functions that serve feature flags from AWS AppConfig."""
