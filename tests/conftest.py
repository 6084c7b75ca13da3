# tests/conftest.py
"""
Fixtures compartilhados para testes do faaschain.

Este módulo define fixtures reutilizáveis que fornecem:
- um endereço de gateway fixo
- uma fábrica de ChainBuilder
- modifiers e handlers triviais
- um encoder que falha deliberadamente
- configurações YAML mínimas (defaults + local) de uma chain

Decisões arquiteturais:
    - Imports do core são realizados de forma lazy para melhorar
      a clareza de erros durante falhas de import
    - Fixtures de configuração são strings, sem I/O; testes de loader
      materializam os arquivos em `tmp_path`

Invariantes:
    - Nenhuma fixture executa modifiers ou handlers
    - Nenhuma fixture realiza I/O de rede
"""

import pytest


GATEWAY = "http://gw"


# =====================================================
# Builder fixtures
# =====================================================

@pytest.fixture
def gateway() -> str:
    return GATEWAY


@pytest.fixture
def new_builder():
    """
    Fixture factory que cria ChainBuilders no gateway de teste.

    Retorna uma função `(chain_name="c1", **kwargs) -> ChainBuilder`,
    permitindo que um mesmo teste construa várias chains independentes
    (ex.: verificar que o marcador de placeholder não vaza entre builders).
    """
    from faaschain.core.builder.builder import ChainBuilder

    def _make(chain_name: str = "c1", **kwargs):
        return ChainBuilder(GATEWAY, chain_name, **kwargs)

    return _make


@pytest.fixture
def identity_modifier():
    def _identity(data: bytes) -> bytes:
        return data

    return _identity


@pytest.fixture
def failing_encoder():
    """
    Fixture que fornece um encoder que sempre falha.

    Usado para validar que `build()` propaga a exceção do encoder sem
    reembrulho e sem descartar a chain acumulada.
    """

    class EncodeBoom(Exception):
        pass

    class _FailingEncoder:
        error_type = EncodeBoom

        def __init__(self):
            self.calls = 0

        def encode(self, chain):
            self.calls += 1
            raise EncodeBoom("encoder exploded")

    return _FailingEncoder()


def unit_summary(chain):
    """Resumo `[[(kind, alvo), ...], ...]` por fase, para asserts compactos."""
    out = []
    for phase in chain.phases:
        row = []
        for u in phase.units:
            kind = u.kind.value
            if kind == "function":
                row.append((kind, u.function))
            elif kind == "callback":
                row.append((kind, u.url))
            else:
                row.append((kind, None))
        out.append(row)
    return out


@pytest.fixture
def summarize():
    return unit_summary


# =====================================================
# Config fixtures
# =====================================================

@pytest.fixture
def chain_config_defaults_yaml() -> str:
    """
    YAML de defaults semelhante ao uso real: gateway, chain com steps
    declarativos e seção de encoding.
    """
    return """\
gateway:
  url: http://gateway:8080
chain:
  name: upload-pipeline
  id: req-001
  steps:
    - modifier: normalize
    - apply: resize
      headers:
        X-Quality: high
      query:
        size: ["64", "128"]
    - apply: watermark
      sync: true
    - apply: store
    - callback: http://hooks.local/done
      headers:
        X-Token: abc
    - on_failure: alert
    - finally: cleanup
encoding:
  indent: null
  sort_keys: false
"""


@pytest.fixture
def chain_config_local_yaml() -> str:
    """YAML local que apenas sobrescreve gateway e encoding."""
    return """\
gateway:
  url: http://localhost:31112/base/
encoding:
  sort_keys: true
"""
