# src/faaschain/core/builder/builder.py
"""
ChainBuilder — superfície pública de construção de chains.

Este módulo define o `ChainBuilder`, que envolve uma `Chain`, decide a
fase de destino de cada chamada e, ao final, codifica a definição que
será entregue ao gateway.

Algoritmo de atribuição de fases:

    apply_modifier / callback
        - chain vazia → cria uma fase, adiciona à chain e marca a fase
          como *placeholder* (ainda sem função)
        - caso contrário → usa a última fase, sem alterar o marcador

    apply(function, *options)
        - síncrono → usa a última fase (criando uma se a chain estiver vazia)
        - assíncrono + placeholder → usa a última fase (preenche o placeholder)
        - assíncrono sem placeholder → cria uma nova fase (nova barreira)
        - em todos os casos o marcador de placeholder volta a False

Decisões arquiteturais:
    - O marcador de placeholder é estado de cada builder, nunca global;
      builders intercalados na mesma thread não interferem entre si
    - Toda mutação é registrada no Event Log do builder (`events`)
    - Falhas do encoder em `build()` são propagadas sem reembrulho e a
      chain permanece íntegra e recodificável

Invariantes:
    - Fases só são adicionadas ao final da chain
    - Unidades só são adicionadas ao final de uma fase
    - A definição é vazia até a primeira chamada bem-sucedida de `build()`

Limites explícitos:
    - Não executa nada e não realiza I/O
    - Não valida existência das funções referenciadas
    - Não é thread-safe: cada builder pertence a um único chamador
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Union

from faaschain.core.chain.chain import Chain, Phase
from faaschain.core.chain.types import ErrorHandler, Handler, Modifier
from faaschain.core.chain.units import CallbackUnit, FunctionUnit, ModifierUnit, Unit
from faaschain.core.encoding.encoder import ChainEncoder, JsonChainEncoder
from faaschain.core.encoding.hashing import compute_definition_hash

from .options import Options, OptionLike, resolve_options
from .urls import async_function_url, function_url


def _attach_options(unit: Union[FunctionUnit, CallbackUnit], options: Options) -> None:
    for key, value in options.header.items():
        unit.add_header(key, value)
    for key, values in options.query.items():
        for value in values:
            unit.add_param(key, value)


class ChainBuilder:
    """
    Builder fluente de uma chain nomeada no gateway.

    As URLs síncrona e assíncrona são derivadas uma única vez aqui;
    um endereço de gateway malformado levanta `InvalidGatewayUrlError`.

    Exemplo:
        fc = ChainBuilder("http://gw", "c1")
        fc.apply_modifier(lambda b: b.upper()).apply("f1").apply("f2", SYNC)
        fc.build()
    """

    def __init__(
        self,
        gateway: str,
        chain_name: str,
        *,
        encoder: Optional[ChainEncoder] = None,
    ):
        self.name: str = chain_name
        self._url: str = function_url(gateway, chain_name)
        self._async_url: str = async_function_url(gateway, chain_name)
        self._chain: Chain = Chain()
        self._id: str = ""
        self._definition: bytes = b""
        self._encoder: ChainEncoder = encoder if encoder is not None else JsonChainEncoder()
        # última fase criada só para hospedar um modifier/callback com a chain vazia
        self._empty_phase: bool = False
        self.events: List[Dict[str, Any]] = []

    # -----------------------------
    # Event Log
    # -----------------------------
    def log(self, *, event_type: str, **extra: Any) -> None:
        event = {
            "chain": self.name,
            "event_type": event_type,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    # -----------------------------
    # Phase assignment
    # -----------------------------
    def _new_phase(self) -> Phase:
        phase = Phase()
        self._chain.add_phase(phase)
        self.log(event_type="phase_created", phase_index=self._chain.count_phases() - 1)
        return phase

    def _current_or_new_phase(self) -> Phase:
        phase = self._chain.get_last_phase()
        if phase is None:
            phase = self._new_phase()
        return phase

    def _placeholder_target(self) -> Phase:
        if self._chain.count_phases() == 0:
            phase = self._new_phase()
            self._empty_phase = True
            return phase
        return self._chain.get_last_phase()

    def _append(self, phase: Phase, unit: Unit) -> None:
        phase.add_unit(unit)
        self.log(
            event_type="unit_appended",
            phase_index=self._chain.count_phases() - 1,
            kind=unit.kind.value,
        )

    # -----------------------------
    # Public surface
    # -----------------------------
    def set_id(self, request_id: str) -> "ChainBuilder":
        self._id = request_id
        self.log(event_type="id_set", id=request_id)
        return self

    def apply_modifier(self, transform: Modifier) -> "ChainBuilder":
        """Adiciona uma transformação inline `bytes -> bytes` à fase corrente."""
        phase = self._placeholder_target()
        self._append(phase, ModifierUnit(transform=transform))
        return self

    def callback(self, url: str, *options: OptionLike) -> "ChainBuilder":
        """
        Registra um webhook na fase corrente.

        Um ou mais callbacks podem ser usados para enviar dados parciais
        da chain ou notificar sua conclusão. Apenas headers e query das
        opções são considerados; a flag síncrona não se aplica.
        """
        unit = CallbackUnit(url=url)
        _attach_options(unit, resolve_options(*options))
        phase = self._placeholder_target()
        self._append(phase, unit)
        return self

    def apply(self, function: str, *options: OptionLike) -> "ChainBuilder":
        """
        Aplica uma função remota pelo nome.

        A chamada é assíncrona por padrão e abre uma nova fase; passe
        `SYNC` para mantê-la na fase corrente.
        """
        resolved = resolve_options(*options)
        unit = FunctionUnit(function=function)
        _attach_options(unit, resolved)

        if resolved.sync:
            phase = self._current_or_new_phase()
        elif self._empty_phase:
            phase = self._chain.get_last_phase()
        else:
            phase = self._new_phase()

        self._empty_phase = False
        self._append(phase, unit)
        return self

    def on_failure(self, handler: ErrorHandler) -> "ChainBuilder":
        self._chain.failure_handler = handler
        self.log(event_type="handler_registered", handler="failure")
        return self

    def finally_(self, handler: Handler) -> "ChainBuilder":
        """Registra a rotina chamada ao término da execução (sucesso ou falha)."""
        self._chain.finally_handler = handler
        self.log(event_type="handler_registered", handler="finally")
        return self

    def build(self) -> None:
        """
        Codifica a chain acumulada e armazena a definição.

        Exceções do encoder chegam ao chamador inalteradas; nesse caso a
        definição anterior (se houver) é mantida.
        """
        definition = self._encoder.encode(self._chain)
        self._definition = definition
        self.log(
            event_type="chain_built",
            phases=self._chain.count_phases(),
            definition_sha256=compute_definition_hash(definition),
        )

    # -----------------------------
    # Accessors
    # -----------------------------
    @property
    def id(self) -> str:
        return self._id

    @property
    def url(self) -> str:
        return self._url

    @property
    def async_url(self) -> str:
        return self._async_url

    @property
    def definition(self) -> str:
        """
        Visão textual da definição.

        Bytes que não são UTF-8 válido (encoders binários) viram surrogates;
        `definition.encode("utf-8", "surrogateescape")` devolve os bytes originais.
        """
        return self._definition.decode("utf-8", errors="surrogateescape")

    @property
    def definition_bytes(self) -> bytes:
        return self._definition

    @property
    def chain(self) -> Chain:
        return self._chain

    @property
    def has_placeholder_phase(self) -> bool:
        return self._empty_phase

