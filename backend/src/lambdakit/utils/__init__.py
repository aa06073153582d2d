"""Utility modules for the backend application."""

from lambdakit.utils.logging import (
    clear_request_context,
    configure_logging,
    get_logger,
    mask_pii,
    mask_token,
    set_request_context,
)
from lambdakit.utils.responses import error_response, json_response

__all__ = [
    "clear_request_context",
    "configure_logging",
    "error_response",
    "get_logger",
    "json_response",
    "mask_pii",
    "mask_token",
    "set_request_context",
]
