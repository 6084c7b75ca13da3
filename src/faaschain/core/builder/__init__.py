# src/faaschain/core/builder/__init__.py
"""
Builder do faaschain.

Este pacote contém a superfície pública de construção de chains:

    - options → opções por chamada (header, query, sync) e sua resolução
    - urls    → derivação das URLs síncrona e assíncrona no gateway
    - builder → `ChainBuilder` e o algoritmo de atribuição de fases
    - compose → construção de um builder a partir de configuração declarativa

Princípios fundamentais:
    - Toda chamada mutável passa pelo `ChainBuilder`
    - A decisão de fase é determinística para a mesma sequência de chamadas
    - Nenhuma chamada realiza I/O

Limites explícitos:
    - Não transmite a definição ao gateway
    - Não executa handlers
"""

from .builder import ChainBuilder
from .compose import compose_chain
from .options import (
    SYNC,
    Header,
    Option,
    Options,
    Query,
    SyncCall,
    header,
    query,
    resolve_options,
    sync_call,
)
from .urls import async_function_url, function_url

__all__ = [
    "ChainBuilder",
    "compose_chain",
    "SYNC",
    "Header",
    "Option",
    "Options",
    "Query",
    "SyncCall",
    "header",
    "query",
    "resolve_options",
    "sync_call",
    "function_url",
    "async_function_url",
]
