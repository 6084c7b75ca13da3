# src/faaschain/core/config/settings.py
"""
Interpretação estrutural da configuração de chain.

Este módulo converte a configuração resolvida (dict) em valores tipados
prontos para a composição declarativa:

    - ChainSettings → gateway, nome, id, encoding e steps
    - StepSpec      → uma chamada do builder descrita em config

Seções reconhecidas:
    - gateway.url        (obrigatório)
    - chain.name         (obrigatório)
    - chain.id           (opcional)
    - chain.steps        (opcional; lista ordenada)
    - encoding.indent    (opcional; inteiro >= 0 ou null)
    - encoding.sort_keys (opcional; bool)

Cada step declara exatamente uma ação:

    {apply: <função>, sync: <bool>, headers: {...}, query: {k: [v, ...]}}
    {callback: <url>, headers: {...}, query: {...}}
    {modifier: <nome no registry>}
    {on_failure: <nome de handler>}
    {finally: <nome de handler>}

Decisões arquiteturais:
    - A ordem dos steps é a ordem das chamadas ao builder
    - Valores de headers são convertidos para texto; um valor de query
      escalar vira uma lista de um elemento
    - Qualquer inconsistência levanta `InvalidChainConfigError`

Limites explícitos:
    - Não resolve nomes de modifiers/handlers (ver `compose_chain`)
    - Não constrói a chain
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .errors import InvalidChainConfigError

STEP_ACTIONS = ("apply", "callback", "modifier", "on_failure", "finally")
_OPTION_ACTIONS = {"apply", "callback"}


@dataclass(frozen=True)
class StepSpec:
    action: str
    target: str
    sync: bool = False
    headers: Dict[str, str] = field(default_factory=dict)
    query: Dict[str, List[str]] = field(default_factory=dict)


@dataclass(frozen=True)
class ChainSettings:
    gateway: str
    name: str
    id: Optional[str] = None
    indent: Optional[int] = None
    sort_keys: bool = False
    steps: List[StepSpec] = field(default_factory=list)


def _section(config: Dict[str, Any], key: str, *, required: bool) -> Dict[str, Any]:
    value = config.get(key)
    if value is None:
        if required:
            raise InvalidChainConfigError(f"Seção obrigatória ausente: '{key}'")
        return {}
    if not isinstance(value, dict):
        raise InvalidChainConfigError(
            f"Seção '{key}' deve ser dict, recebido: {type(value).__name__}"
        )
    return value


def _required_str(section: Dict[str, Any], key: str, where: str) -> str:
    value = section.get(key)
    if not isinstance(value, str) or not value.strip():
        raise InvalidChainConfigError(f"'{where}.{key}' deve ser uma string não vazia")
    return value


def _parse_headers(raw: Any, where: str) -> Dict[str, str]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise InvalidChainConfigError(f"{where}: 'headers' deve ser dict")
    out: Dict[str, str] = {}
    for k, v in raw.items():
        if isinstance(v, (dict, list)) or v is None:
            raise InvalidChainConfigError(f"{where}: header '{k}' deve ser escalar")
        out[str(k)] = str(v)
    return out


def _parse_query(raw: Any, where: str) -> Dict[str, List[str]]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise InvalidChainConfigError(f"{where}: 'query' deve ser dict")
    out: Dict[str, List[str]] = {}
    for k, v in raw.items():
        values = v if isinstance(v, list) else [v]
        if any(isinstance(x, (dict, list)) or x is None for x in values):
            raise InvalidChainConfigError(f"{where}: query '{k}' deve conter apenas escalares")
        out[str(k)] = [str(x) for x in values]
    return out


def _parse_step(raw: Any, index: int) -> StepSpec:
    where = f"chain.steps[{index}]"
    if not isinstance(raw, dict):
        raise InvalidChainConfigError(f"{where} deve ser dict, recebido: {type(raw).__name__}")

    actions = [a for a in STEP_ACTIONS if a in raw]
    if len(actions) != 1:
        raise InvalidChainConfigError(
            f"{where} deve declarar exatamente uma ação entre {list(STEP_ACTIONS)}, "
            f"encontrado: {actions}"
        )
    action = actions[0]
    target = _required_str(raw, action, where)

    if action not in _OPTION_ACTIONS:
        extra = sorted(k for k in ("sync", "headers", "query") if k in raw)
        if extra:
            raise InvalidChainConfigError(f"{where}: '{action}' não aceita {extra}")
        return StepSpec(action=action, target=target)

    sync = raw.get("sync", False)
    if not isinstance(sync, bool):
        raise InvalidChainConfigError(f"{where}: 'sync' deve ser bool")
    if sync and action != "apply":
        raise InvalidChainConfigError(f"{where}: 'sync' só se aplica a 'apply'")

    return StepSpec(
        action=action,
        target=target,
        sync=sync,
        headers=_parse_headers(raw.get("headers"), where),
        query=_parse_query(raw.get("query"), where),
    )


def resolve_chain_settings(config: Dict[str, Any]) -> ChainSettings:
    """
    Valida e converte a configuração resolvida em `ChainSettings`.

    Args:
        config (Dict[str, Any]): Configuração efetiva (ex.: de `load_config`).

    Returns:
        ChainSettings: Valores tipados para `compose_chain`.

    Raises:
        InvalidChainConfigError: Se qualquer seção reconhecida for inválida.
    """
    if not isinstance(config, dict):
        raise InvalidChainConfigError(
            f"Config deve ser dict, recebido: {type(config).__name__}"
        )

    gateway = _section(config, "gateway", required=True)
    chain = _section(config, "chain", required=True)
    encoding = _section(config, "encoding", required=False)

    chain_id = chain.get("id")
    if chain_id is not None and not isinstance(chain_id, str):
        raise InvalidChainConfigError("'chain.id' deve ser string")

    indent = encoding.get("indent")
    if indent is not None and (isinstance(indent, bool) or not isinstance(indent, int) or indent < 0):
        raise InvalidChainConfigError("'encoding.indent' deve ser inteiro >= 0 ou null")

    sort_keys = encoding.get("sort_keys", False)
    if not isinstance(sort_keys, bool):
        raise InvalidChainConfigError("'encoding.sort_keys' deve ser bool")

    raw_steps = chain.get("steps") or []
    if not isinstance(raw_steps, list):
        raise InvalidChainConfigError("'chain.steps' deve ser uma lista")

    return ChainSettings(
        gateway=_required_str(gateway, "url", "gateway"),
        name=_required_str(chain, "name", "chain"),
        id=chain_id,
        indent=indent,
        sort_keys=sort_keys,
        steps=[_parse_step(s, i) for i, s in enumerate(raw_steps)],
    )
