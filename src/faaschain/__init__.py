# src/faaschain/__init__.py
"""
faaschain — builder de definições de chain para gateways FaaS.

Este pacote raiz define o namespace público do faaschain, uma biblioteca
para descrever, em memória, pipelines parcialmente ordenados de chamadas
a funções remotas, transformações inline (modifiers) e callbacks, e
serializá-los em uma definição transmissível a um executor externo.

Princípios centrais:
    - Uma chain é uma sequência ordenada de fases (barreiras de sincronização)
    - Cada chamada do builder decide explicitamente a fase de destino
    - A construção é determinística, síncrona e livre de I/O
    - A execução pertence exclusivamente ao gateway externo

Arquitetura em alto nível:
    - core.chain    → unidades executáveis, Phase, Chain e registry de modifiers
    - core.builder  → opções por chamada, URLs do gateway e algoritmo de fases
    - core.encoding → codificação/decodificação da definição e hashing
    - core.config   → carregamento, merge e hashing de configuração

Limites explícitos:
    - Não executa funções, modifiers ou callbacks
    - Não realiza I/O de rede
    - Não valida a existência das funções referenciadas
"""
# src/faaschain/__init__.py
from .core.builder import (
    ChainBuilder,
    SYNC,
    header,
    query,
    sync_call,
)
from .core.chain import Chain, Phase, UnitKind

__all__ = [
    "ChainBuilder",
    "Chain",
    "Phase",
    "UnitKind",
    "SYNC",
    "header",
    "query",
    "sync_call",
]
