"""Diagnostics sink backed by loguru."""

from collections.abc import Mapping
from typing import override

from loguru import logger

from ..common.filesystem import DiagnosticsSink


class Debugger(DiagnosticsSink):
    """Records non-fatal diagnostics when debugging is enabled.

    Disabled debuggers drop every record. Recording never raises.
    """

    def __init__(self, enabled: bool = False):
        self.enabled: bool = enabled

    @override
    def record(self, message: str, context: Mapping[str, object] | None = None) -> None:
        if not self.enabled:
            return
        try:
            logger.bind(**dict(context or {})).debug(message)
        except Exception as e:
            logger.error(f"Error recording diagnostics: {e}")
