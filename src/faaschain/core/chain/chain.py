# src/faaschain/core/chain/chain.py
"""
Agregados Phase e Chain.

Este módulo define as estruturas que o builder constrói incrementalmente
e que a camada de encoding serializa:

    - Phase → sequência ordenada de unidades despachadas em conjunto
    - Chain → sequência ordenada de fases + handlers de falha e de finalização

Semântica de execução (aplicada pelo executor externo, não por este módulo):
    - Fases executam estritamente em sequência
    - Unidades dentro de uma fase são concorrentes entre si
    - A chain só avança para a próxima fase após a conclusão da atual

Invariantes:
    - Uma fase, uma vez adicionada, nunca é removida nem reordenada
    - Unidades só são adicionadas ao final da fase
    - Handlers são sobrescritos (última escrita vence), nunca acumulados

Limites explícitos:
    - Não decide atribuição de fases (responsabilidade do ChainBuilder)
    - Não executa unidades nem handlers
    - Não escolhe formato de serialização (responsabilidade do encoder)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from faaschain.core.exceptions import DefinitionDecodeError

from .types import ErrorHandler, Handler, UnitKind
from .units import Unit, unit_from_dict


@dataclass
class Phase:
    """
    Fronteira de sincronização da chain.

    Todas as unidades de uma fase são despachadas juntas; a fase seguinte
    só começa quando estas terminam.
    """

    units: List[Unit] = field(default_factory=list)

    def add_unit(self, unit: Unit) -> None:
        self.units.append(unit)

    def count_units(self) -> int:
        return len(self.units)

    def has_function(self) -> bool:
        return any(u.kind is UnitKind.FUNCTION for u in self.units)

    def to_dict(self) -> Dict[str, Any]:
        return {"functions": [u.to_dict() for u in self.units]}


@dataclass
class Chain:
    """
    Definição completa do pipeline: fases ordenadas e handlers opcionais.

    Campos:
        - phases: fases em ordem de execução
        - failure_handler: chamado pelo executor se qualquer unidade falhar
        - finally_handler: chamado pelo executor ao término (sucesso ou falha)

    Os handlers são callables em memória e não participam da serialização;
    `to_dict()` registra apenas se estão presentes.
    """

    phases: List[Phase] = field(default_factory=list)
    failure_handler: Optional[ErrorHandler] = None
    finally_handler: Optional[Handler] = None

    def add_phase(self, phase: Phase) -> None:
        self.phases.append(phase)

    def count_phases(self) -> int:
        return len(self.phases)

    def get_last_phase(self) -> Optional[Phase]:
        if not self.phases:
            return None
        return self.phases[-1]

    def get_phase(self, index: int) -> Phase:
        return self.phases[index]

    def is_last_phase(self, index: int) -> bool:
        return index == len(self.phases) - 1

    def to_dict(self) -> Dict[str, Any]:
        return {
            "phases": [p.to_dict() for p in self.phases],
            "has_failure_handler": self.failure_handler is not None,
            "has_finally": self.finally_handler is not None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Chain":
        """
        Reconstrói a estrutura de uma Chain a partir de `to_dict()`.

        Modifiers voltam sem transform e os handlers ficam ausentes,
        pois nenhum callable sobrevive à serialização.

        Raises:
            DefinitionDecodeError: Se a estrutura não corresponder ao formato
                produzido por `to_dict()`.
        """
        if not isinstance(data, dict):
            raise DefinitionDecodeError(f"definition root must be an object, got {type(data).__name__}")

        raw_phases = data.get("phases", []) or []
        if not isinstance(raw_phases, list):
            raise DefinitionDecodeError("'phases' must be a list")

        chain = cls()
        for i, raw in enumerate(raw_phases):
            if not isinstance(raw, dict):
                raise DefinitionDecodeError(f"phase {i} must be an object")
            units = raw.get("functions", []) or []
            if not isinstance(units, list):
                raise DefinitionDecodeError(f"phase {i}: 'functions' must be a list")
            chain.add_phase(Phase(units=[unit_from_dict(u) for u in units]))
        return chain
