from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from .assembler import ModuleAssembler

logger = logging.getLogger(__name__)


class ModuleNotRegistered(KeyError):
    pass


class ModuleRegistry:
    """
    In-memory module registry.

    Meant to be handed to routers as their resolver, so a router can build
    the modules it navigates to without importing them.
    """

    def __init__(self) -> None:
        # key: module_key -> assembler
        self._assemblers: Dict[str, ModuleAssembler[Any, Any, Any, Any, Any, Any, Any]] = {}

    def register(self, module_key: str, assembler: ModuleAssembler[Any, Any, Any, Any, Any, Any, Any]) -> None:
        """
        Register (or replace) the assembler of a module.
        """
        if module_key in self._assemblers:
            logger.debug("Replacing assembler for module=%s", module_key)
        self._assemblers[module_key] = assembler

    def resolve(self, module_key: str) -> ModuleAssembler[Any, Any, Any, Any, Any, Any, Any]:
        assembler = self._assemblers.get(module_key)
        if assembler is None:
            raise ModuleNotRegistered(f"Module '{module_key}' not registered")
        return assembler

    def assemble(self, module_key: str, entities: Any, resolver: Optional[Any] = None) -> Any:
        """
        Assemble a registered module and return its view.
        The new module resolves through this registry unless told otherwise.
        """
        assembler = self.resolve(module_key)
        logger.debug("Assembling module=%s", module_key)
        return assembler.assemble(entities, self if resolver is None else resolver)

    def keys(self) -> List[str]:
        return list(self._assemblers)

    def __contains__(self, module_key: object) -> bool:
        return module_key in self._assemblers
