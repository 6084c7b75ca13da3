# src/faaschain/core/config/__init__.py

"""
Camada de configuração do faaschain.

Este pacote carrega, mescla, identifica e interpreta a configuração que
descreve uma chain de forma declarativa (gateway, nome, encoding e steps).

Responsabilidades do pacote:
    - Carregamento de arquivos YAML/JSON (defaults + override local)
    - Deep-merge determinístico
    - Hash canônico para rastreabilidade
    - Conversão estrutural em `ChainSettings`

Limites explícitos:
    - Não constrói a chain (ver `faaschain.core.builder.compose`)
    - Não resolve modifiers/handlers por nome
"""

from .errors import (  # noqa: F401
    ConfigError,
    ConfigTypeConflictError,
    DefaultsNotFoundError,
    InvalidChainConfigError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)
from .hashing import compute_config_hash  # noqa: F401
from .loader import load_config  # noqa: F401
from .merge import deep_merge  # noqa: F401
from .settings import ChainSettings, StepSpec, resolve_chain_settings  # noqa: F401
