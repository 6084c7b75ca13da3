# src/faaschain/core/encoding/decoder.py
"""
Decoder da definição JSON de chain.

Reconstrói a estrutura (fases e unidades) de uma definição produzida pelo
`JsonChainEncoder`, para inspeção pela camada de dispatch.

Limites explícitos:
    - Modifiers voltam sem transform
    - Handlers não são restaurados
"""

from __future__ import annotations

import json
from typing import Union

from faaschain.core.chain.chain import Chain
from faaschain.core.exceptions import DefinitionDecodeError


def decode_definition(definition: Union[bytes, str]) -> Chain:
    """
    Decodifica uma definição JSON em uma Chain estrutural.

    Args:
        definition (Union[bytes, str]): Definição codificada (UTF-8).

    Returns:
        Chain: Chain com as mesmas fases, unidades e ordem da definição.

    Raises:
        DefinitionDecodeError: Se o conteúdo não for JSON válido ou não
            seguir o formato de definição.
    """
    if isinstance(definition, bytes):
        try:
            definition = definition.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DefinitionDecodeError(f"definition is not valid UTF-8: {e}") from e

    if not definition.strip():
        raise DefinitionDecodeError("definition is empty")

    try:
        data = json.loads(definition)
    except json.JSONDecodeError as e:
        raise DefinitionDecodeError(f"definition is not valid JSON: {e}") from e

    return Chain.from_dict(data)
