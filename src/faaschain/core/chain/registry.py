# src/faaschain/core/chain/registry.py
"""
Registro nomeado de modifiers e handlers.

Este módulo define o `ModifierRegistry`, que associa nomes estáveis a
callables em memória para que chains descritas em configuração
(YAML/JSON) possam referenciar modifiers e handlers por nome.

Responsabilidades do módulo:
    - Validar unicidade de nomes por namespace (modifiers, handlers)
    - Preservar a ordem de registro
    - Expor busca explícita com erro tipado para nomes ausentes

Decisões arquiteturais:
    - Duplicidade é erro fatal no momento do registro
    - Modifiers e handlers vivem em namespaces separados
    - O registry não invoca nenhum callable

Invariantes:
    - Cada nome é único dentro do seu namespace
    - `list_modifiers()` reflete exatamente a ordem de registro

Limites explícitos:
    - Não constrói chains (ver `faaschain.core.builder.compose`)
    - Não valida a assinatura dos callables
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, List

from faaschain.core.exceptions import DuplicateModifierNameError, UnknownModifierError

from .types import Modifier


def _check_name(name: str) -> None:
    if not isinstance(name, str) or not name.strip():
        raise ValueError("registry name must be a non-empty string")


@dataclass
class ModifierRegistry:
    """Registro canônico de modifiers e handlers referenciáveis por nome."""

    _modifiers: Dict[str, Modifier] = field(default_factory=dict, init=False, repr=False)
    _handlers: Dict[str, Callable[..., None]] = field(default_factory=dict, init=False, repr=False)
    _order: List[str] = field(default_factory=list, init=False, repr=False)

    def add_modifier(self, name: str, transform: Modifier) -> None:
        _check_name(name)
        if name in self._modifiers:
            raise DuplicateModifierNameError(f"Duplicate modifier name: {name}")
        self._modifiers[name] = transform
        self._order.append(name)

    def add_handler(self, name: str, handler: Callable[..., None]) -> None:
        _check_name(name)
        if name in self._handlers:
            raise DuplicateModifierNameError(f"Duplicate handler name: {name}")
        self._handlers[name] = handler

    def get_modifier(self, name: str) -> Modifier:
        if name not in self._modifiers:
            raise UnknownModifierError(f"Unknown modifier: {name}")
        return self._modifiers[name]

    def get_handler(self, name: str) -> Callable[..., None]:
        if name not in self._handlers:
            raise UnknownModifierError(f"Unknown handler: {name}")
        return self._handlers[name]

    def list_modifiers(self) -> List[str]:
        return list(self._order)
