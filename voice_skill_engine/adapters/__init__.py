"""Host-platform adapter exports."""

from .attributes_manager import AttributesManager
from .handler_input import build_handler_input, validator_for

__all__ = ["AttributesManager", "build_handler_input", "validator_for"]
