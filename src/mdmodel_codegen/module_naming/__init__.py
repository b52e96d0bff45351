"""Module naming exports."""

from .module_namer import DEFAULT_MODULE_NAME, module_name_for

__all__ = ["DEFAULT_MODULE_NAME", "module_name_for"]
