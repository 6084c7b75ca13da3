# src/faaschain/core/config/merge.py
"""
Deep-merge da configuração de chain.

Política de merge:
    - dict → merge recursivo por chave
    - list → sobrescrita total (ex.: `chain.steps` local substitui a lista inteira)
    - escalar → sobrescrita direta
    - null → valor anulável: um default null aceita qualquer tipo e um override
      null anula um escalar; null sobre dict ou list é conflito
    - conflito de tipos → `ConfigTypeConflictError`

Nenhum input é mutado; a mesma entrada sempre produz a mesma saída.
"""

from copy import deepcopy
from typing import Any, Dict

from .errors import ConfigTypeConflictError


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Mescla `override` sobre `base` e devolve um novo dicionário.

    Args:
        base (Dict[str, Any]): Configuração base (defaults).
        override (Dict[str, Any]): Overrides explícitos (local).

    Returns:
        Dict[str, Any]: Configuração resultante.

    Raises:
        ConfigTypeConflictError: Se uma mesma chave tiver tipos incompatíveis.
    """
    if not isinstance(base, dict) or not isinstance(override, dict):
        raise ConfigTypeConflictError(
            f"Deep-merge requer dicts no nível raiz, recebido: "
            f"{type(base).__name__} vs {type(override).__name__}"
        )

    result: Dict[str, Any] = deepcopy(base)

    for key, override_value in override.items():
        if key not in result or result[key] is None:
            result[key] = deepcopy(override_value)
            continue

        base_value = result[key]

        if override_value is None:
            if isinstance(base_value, (dict, list)):
                raise ConfigTypeConflictError(
                    f"Conflito de tipo na chave '{key}': "
                    f"{type(base_value).__name__} vs NoneType"
                )
            result[key] = None
            continue

        if isinstance(base_value, dict) and isinstance(override_value, dict):
            result[key] = deep_merge(base_value, override_value)
            continue

        if isinstance(base_value, list) and isinstance(override_value, list):
            result[key] = deepcopy(override_value)
            continue

        # bool é subclasse de int; tratamos como tipos distintos
        if type(base_value) is not type(override_value) and not (
            isinstance(base_value, (int, float))
            and isinstance(override_value, (int, float))
            and not isinstance(base_value, bool)
            and not isinstance(override_value, bool)
        ):
            raise ConfigTypeConflictError(
                f"Conflito de tipo na chave '{key}': "
                f"{type(base_value).__name__} vs {type(override_value).__name__}"
            )

        result[key] = deepcopy(override_value)

    return result
