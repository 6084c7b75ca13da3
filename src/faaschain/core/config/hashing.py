# src/faaschain/core/config/hashing.py
"""
Hashing canônico da configuração de chain.

O hash identifica a configuração efetiva (após merge) usada para compor
uma chain, independente da ordem original das chaves.

Política:
    - JSON canônico (sort_keys, separadores compactos, UTF-8)
    - SHA-256, string hexadecimal de 64 caracteres
"""


import hashlib
import json
from typing import Any, Dict


def compute_config_hash(config: Dict[str, Any]) -> str:
    """
    Gera o hash SHA-256 do JSON canônico da configuração.

    Raises:
        TypeError: Se `config` não for um dicionário.
    """
    if not isinstance(config, dict):
        raise TypeError(
            f"Config para hashing deve ser dict, recebido: {type(config).__name__}"
        )

    canonical_json = json.dumps(
        config,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )

    return hashlib.sha256(canonical_json.encode("utf-8")).hexdigest()
