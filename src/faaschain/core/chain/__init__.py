# src/faaschain/core/chain/__init__.py
"""
# Chain Core — faaschain

Este pacote define as **estruturas fundamentais** de uma chain:

- **types**
  - `UnitKind`: variantes fechadas de unidade executável
  - `Modifier`, `Handler`, `ErrorHandler`: contratos de callables armazenados

- **units**
  - `FunctionUnit`, `ModifierUnit`, `CallbackUnit`

- **chain**
  - `Phase`: grupo de unidades despachado como uma barreira
  - `Chain`: fases ordenadas + handlers de falha e finalização

- **registry**
  - `ModifierRegistry`: nomes estáveis para modifiers e handlers

## Invariantes

- Fases executam em sequência; unidades de uma fase, concorrentemente
- Fases e unidades só são adicionadas ao final, nunca removidas

## Limites Explícitos

- Não decide atribuição de fases (ver `core.builder`)
- Não executa nada
"""

from .chain import Chain, Phase
from .registry import ModifierRegistry
from .types import ErrorHandler, Handler, Modifier, UnitKind
from .units import CallbackUnit, FunctionUnit, ModifierUnit, Unit, unit_from_dict

__all__ = [
    "Chain",
    "Phase",
    "ModifierRegistry",
    "UnitKind",
    "Modifier",
    "Handler",
    "ErrorHandler",
    "FunctionUnit",
    "ModifierUnit",
    "CallbackUnit",
    "Unit",
    "unit_from_dict",
]
