"""Quiz Storage - JSON persistence for modules."""

from .module_store import ModuleStore

__all__ = ["ModuleStore"]
