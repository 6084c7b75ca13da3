# src/faaschain/core/encoding/encoder.py
"""
Encoder da definição de chain.

Este módulo define o contrato de encoding consumido pelo builder e o
encoder JSON usado por padrão.

O builder trata o encoder como uma capacidade opaca:
    - recebe a Chain acumulada
    - devolve bytes prontos para transmissão (não necessariamente UTF-8)
    - falhas são exceções propagadas ao chamador sem reembrulho

Formato produzido pelo `JsonChainEncoder` (UTF-8):

    {"phases": [{"functions": [<unit>, ...]}, ...],
     "has_failure_handler": <bool>, "has_finally": <bool>}

Limites explícitos:
    - Não transmite a definição ao gateway
    - Não serializa callables (transform de modifiers, handlers)
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Optional, Protocol, runtime_checkable

from faaschain.core.chain.chain import Chain


@runtime_checkable
class ChainEncoder(Protocol):
    """Capacidade de encoding: `encode(chain) -> bytes`, falhas via exceção."""

    def encode(self, chain: Chain) -> bytes:
        ...


@dataclass(frozen=True)
class JsonChainEncoder:
    """
    Encoder JSON canônico.

    Campos:
        - indent: indentação opcional (None → JSON compacto)
        - sort_keys: ordena chaves dos objetos quando True
    """

    indent: Optional[int] = None
    sort_keys: bool = False

    def encode(self, chain: Chain) -> bytes:
        return json.dumps(
            chain.to_dict(),
            indent=self.indent,
            sort_keys=self.sort_keys,
            ensure_ascii=False,
        ).encode("utf-8")
