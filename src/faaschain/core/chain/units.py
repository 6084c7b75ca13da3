# src/faaschain/core/chain/units.py
"""
Unidades executáveis de uma fase.

Este módulo define as três variantes fechadas de unidade executável
que compõem uma Phase:

    - FunctionUnit → função remota identificada por nome, com headers e query
    - ModifierUnit → transformação inline do payload (`bytes -> bytes`)
    - CallbackUnit → webhook identificado por URL, com headers e query

Decisões arquiteturais:
    - A variante é um campo `kind` fixo (não inicializável) em cada dataclass
    - A sincronicidade NÃO é um atributo da unidade: ela é expressa pela
      fronteira de fase em que a unidade é inserida
    - Parâmetros de query são multivalorados (chave → lista ordenada)
    - O transform de um modifier nunca é serializado

Invariantes:
    - `to_dict()` sempre inclui o campo `kind`
    - `unit_from_dict(u.to_dict())` reconstrói a mesma variante
      (modifiers voltam sem transform)

Limites explícitos:
    - Não executa funções, modifiers ou callbacks
    - Não valida existência de funções ou alcance de URLs
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from faaschain.core.exceptions import DefinitionDecodeError

from .types import Modifier, UnitKind


def _copy_params(param: Dict[str, List[str]]) -> Dict[str, List[str]]:
    return {k: list(v) for k, v in param.items()}


@dataclass
class FunctionUnit:
    """Chamada a uma função remota do gateway, identificada pelo nome."""

    function: str
    header: Dict[str, str] = field(default_factory=dict)
    param: Dict[str, List[str]] = field(default_factory=dict)
    kind: UnitKind = field(default=UnitKind.FUNCTION, init=False)

    def add_header(self, key: str, value: str) -> None:
        self.header[key] = value

    def add_param(self, key: str, value: str) -> None:
        self.param.setdefault(key, []).append(value)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "function": self.function,
            "header": dict(self.header),
            "param": _copy_params(self.param),
        }


@dataclass
class ModifierUnit:
    """
    Transformação inline aplicada ao payload pelo executor externo.

    O `transform` é opcional apenas para unidades reconstruídas a partir
    de uma definição codificada, onde o callable não existe.
    """

    transform: Optional[Modifier] = None
    kind: UnitKind = field(default=UnitKind.MODIFIER, init=False)

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value}


@dataclass
class CallbackUnit:
    """Notificação por webhook despachada como canal lateral da fase."""

    url: str
    header: Dict[str, str] = field(default_factory=dict)
    param: Dict[str, List[str]] = field(default_factory=dict)
    kind: UnitKind = field(default=UnitKind.CALLBACK, init=False)

    def add_header(self, key: str, value: str) -> None:
        self.header[key] = value

    def add_param(self, key: str, value: str) -> None:
        self.param.setdefault(key, []).append(value)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "callback": self.url,
            "header": dict(self.header),
            "param": _copy_params(self.param),
        }


Unit = Union[FunctionUnit, ModifierUnit, CallbackUnit]


def _read_header_and_param(data: Dict[str, Any]) -> tuple:
    header = data.get("header", {}) or {}
    param = data.get("param", {}) or {}
    if not isinstance(header, dict) or not isinstance(param, dict):
        raise DefinitionDecodeError("unit header/param must be objects")
    if any(not isinstance(v, list) for v in param.values()):
        raise DefinitionDecodeError("unit param values must be lists")
    return (
        {str(k): str(v) for k, v in header.items()},
        {str(k): [str(x) for x in v] for k, v in param.items()},
    )


def unit_from_dict(data: Dict[str, Any]) -> Unit:
    """
    Reconstrói uma unidade a partir de sua representação serializada.

    A variante é decidida exclusivamente pelo campo `kind`.

    Raises:
        DefinitionDecodeError: Se `kind` for desconhecido ou se campos
            obrigatórios da variante estiverem ausentes.
    """
    if not isinstance(data, dict):
        raise DefinitionDecodeError(f"unit must be an object, got {type(data).__name__}")

    raw_kind = data.get("kind")
    try:
        kind = UnitKind(raw_kind)
    except ValueError:
        raise DefinitionDecodeError(f"unknown unit kind: {raw_kind!r}") from None

    if kind is UnitKind.MODIFIER:
        return ModifierUnit()

    header, param = _read_header_and_param(data)

    if kind is UnitKind.FUNCTION:
        name = data.get("function")
        if not isinstance(name, str) or not name:
            raise DefinitionDecodeError("function unit requires a non-empty 'function'")
        return FunctionUnit(function=name, header=header, param=param)

    url = data.get("callback")
    if not isinstance(url, str) or not url:
        raise DefinitionDecodeError("callback unit requires a non-empty 'callback'")
    return CallbackUnit(url=url, header=header, param=param)
