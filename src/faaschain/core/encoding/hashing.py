# src/faaschain/core/encoding/hashing.py
"""
Hashing da definição codificada.

O hash identifica a definição transmitida ao gateway e serve para
rastreabilidade (ex.: associar execuções a uma versão da chain).

Decisão: SHA-256 sobre os bytes exatos da definição; texto é codificado
em UTF-8 antes do cálculo.
"""

from __future__ import annotations

import hashlib
from typing import Union


def compute_definition_hash(definition: Union[bytes, str]) -> str:
    if isinstance(definition, str):
        definition = definition.encode("utf-8")
    if not isinstance(definition, (bytes, bytearray)):
        raise TypeError(
            f"Definição para hashing deve ser bytes ou str, recebido: {type(definition).__name__}"
        )
    return hashlib.sha256(definition).hexdigest()
