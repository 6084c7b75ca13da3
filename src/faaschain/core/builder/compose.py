# src/faaschain/core/builder/compose.py
"""
Composição declarativa de chains a partir da configuração.

`compose_chain` cria um `ChainBuilder` a partir da configuração resolvida
e reproduz `chain.steps` na ordem declarada, passando por exatamente os
mesmos métodos públicos do builder. Portanto a atribuição de fases de uma
chain declarada em YAML é idêntica à de uma chain construída em código.

Modifiers e handlers são referenciados por nome e resolvidos no
`ModifierRegistry` fornecido.

Ao final, o evento `composed` registra no Event Log do builder o número
de steps e o hash canônico da configuração usada.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from faaschain.core.chain.registry import ModifierRegistry
from faaschain.core.config.errors import InvalidChainConfigError
from faaschain.core.config.hashing import compute_config_hash
from faaschain.core.config.settings import ChainSettings, StepSpec, resolve_chain_settings
from faaschain.core.encoding.encoder import ChainEncoder, JsonChainEncoder

from .builder import ChainBuilder
from .options import OptionLike, header, query, sync_call


def _step_options(step: StepSpec) -> List[OptionLike]:
    opts: List[OptionLike] = [header(k, v) for k, v in step.headers.items()]
    opts.extend(query(k, *values) for k, values in step.query.items())
    if step.sync:
        opts.append(sync_call())
    return opts


def _replay(fc: ChainBuilder, step: StepSpec, modifiers: ModifierRegistry) -> None:
    if step.action == "apply":
        fc.apply(step.target, *_step_options(step))
    elif step.action == "callback":
        fc.callback(step.target, *_step_options(step))
    elif step.action == "modifier":
        fc.apply_modifier(modifiers.get_modifier(step.target))
    elif step.action == "on_failure":
        fc.on_failure(modifiers.get_handler(step.target))
    elif step.action == "finally":
        fc.finally_(modifiers.get_handler(step.target))
    else:
        raise InvalidChainConfigError(f"Ação de step desconhecida: {step.action}")


def compose_chain(
    config: Dict[str, Any],
    *,
    modifiers: Optional[ModifierRegistry] = None,
    encoder: Optional[ChainEncoder] = None,
) -> ChainBuilder:
    """
    Constrói um `ChainBuilder` a partir da configuração resolvida.

    O encoder explícito tem prioridade; sem ele, um `JsonChainEncoder` é
    criado com `encoding.indent` e `encoding.sort_keys`. A chain não é
    codificada aqui: chame `build()` no builder retornado.

    Args:
        config (Dict[str, Any]): Configuração efetiva (ver `load_config`).
        modifiers (Optional[ModifierRegistry]): Modifiers/handlers por nome.
        encoder (Optional[ChainEncoder]): Encoder a usar em `build()`.

    Returns:
        ChainBuilder: Builder com todos os steps aplicados.

    Raises:
        InvalidChainConfigError: Se a configuração for estruturalmente inválida.
        UnknownModifierError: Se um step referenciar nome ausente do registry.
        InvalidGatewayUrlError: Se `gateway.url` for malformado.
    """
    settings: ChainSettings = resolve_chain_settings(config)
    registry = modifiers if modifiers is not None else ModifierRegistry()

    if encoder is None:
        encoder = JsonChainEncoder(indent=settings.indent, sort_keys=settings.sort_keys)

    fc = ChainBuilder(settings.gateway, settings.name, encoder=encoder)
    if settings.id is not None:
        fc.set_id(settings.id)

    for step in settings.steps:
        _replay(fc, step, registry)

    fc.log(
        event_type="composed",
        steps=len(settings.steps),
        config_sha256=compute_config_hash(config),
    )
    return fc
