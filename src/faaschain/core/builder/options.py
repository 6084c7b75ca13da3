# src/faaschain/core/builder/options.py
"""
Opções por chamada do builder.

Este módulo define o `Options`, a configuração efetiva de uma única
chamada a `apply` ou `callback`, e os valores de opção que a compõem.

Uma chamada recebe zero ou mais opções; `resolve_options` parte de um
`Options` em branco e aplica cada opção em ordem:

    - header(k, v)        → header `k`; a última escrita da mesma chave vence
    - query(k, *values)   → parâmetro `k`; substitui a lista anterior da mesma chave
    - sync_call() / SYNC  → marca a chamada como síncrona (OR entre as opções)

Decisões arquiteturais:
    - Opções são valores imutáveis com um método `apply(options)`
    - Qualquer callable `(Options) -> None` também é aceito como opção
    - O `Options` resolvido pertence à chamada e é descartado depois dela

Invariantes:
    - Resolver opções nunca falha
    - Sem opções, o resultado é vazio e assíncrono

Limites explícitos:
    - Não decide a fase de destino (ver `ChainBuilder.apply`)
    - Não valida nomes ou valores de headers/query
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Protocol, Tuple, Union, runtime_checkable


@dataclass
class Options:
    """Configuração efetiva de uma chamada: headers, query e flag síncrona."""

    header: Dict[str, str] = field(default_factory=dict)
    query: Dict[str, List[str]] = field(default_factory=dict)
    sync: bool = False

    def reset(self) -> None:
        self.header = {}
        self.query = {}
        self.sync = False


@runtime_checkable
class Option(Protocol):
    def apply(self, options: Options) -> None:
        ...


OptionLike = Union[Option, Callable[[Options], None]]


@dataclass(frozen=True)
class Header:
    key: str
    value: str

    def apply(self, options: Options) -> None:
        options.header[self.key] = self.value


@dataclass(frozen=True)
class Query:
    key: str
    values: Tuple[str, ...] = ()

    def apply(self, options: Options) -> None:
        options.query[self.key] = list(self.values)


@dataclass(frozen=True)
class SyncCall:
    def apply(self, options: Options) -> None:
        options.sync = True


def header(key: str, value: str) -> Header:
    return Header(key=key, value=value)


def query(key: str, *values: str) -> Query:
    return Query(key=key, values=tuple(values))


def sync_call() -> SyncCall:
    return SyncCall()


# Atalho para `sync_call()`
SYNC = sync_call()


def resolve_options(*opts: OptionLike) -> Options:
    """
    Resolve uma lista de opções em um único `Options` efetivo.

    Args:
        *opts: Opções na ordem em que foram passadas à chamada.

    Returns:
        Options: Headers e query acumulados e flag síncrona combinada.
    """
    resolved = Options()
    resolved.reset()
    for opt in opts:
        if isinstance(opt, Option):
            opt.apply(resolved)
        else:
            opt(resolved)
    return resolved
