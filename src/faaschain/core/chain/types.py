# src/faaschain/core/chain/types.py
"""
Tipos canônicos da chain do faaschain.

Este módulo define o enum de classificação das unidades executáveis e os
contratos de callables que a chain apenas armazena (nunca invoca).

Componentes principais:
    - UnitKind     → enum fechado das variantes de unidade (function, modifier, callback)
    - Modifier     → transformação inline `bytes -> bytes` (pode levantar exceção)
    - Handler      → rotina de finalização chamada pelo executor externo
    - ErrorHandler → rotina de falha que recebe a exceção ocorrida

Princípios fundamentais:
    - Tipos são estáveis e serializáveis (valores textuais canônicos)
    - Nenhuma lógica de execução vive neste módulo

Limites explícitos:
    - Não executa modifiers nem handlers
    - Não decide atribuição de fases
"""

from __future__ import annotations

from enum import Enum
from typing import Callable


Modifier = Callable[[bytes], bytes]
Handler = Callable[[], None]
ErrorHandler = Callable[[Exception], None]


class UnitKind(str, Enum):
    """
    Variantes de unidade executável dentro de uma fase.

    Os valores são strings para facilitar:
        - serialização em JSON (campo `kind` da definição)
        - inspeção pela camada de dispatch
        - leitura do Event Log do builder

    Tipos definidos:
        - FUNCTION: chamada a uma função remota pelo nome
        - MODIFIER: transformação inline do payload, sem alvo de rede
        - CALLBACK: notificação por webhook para uma URL

    Invariantes:
        - Toda unidade possui exatamente um `kind`
        - O conjunto de variantes é fechado
    """
    FUNCTION = "function"
    MODIFIER = "modifier"
    CALLBACK = "callback"
