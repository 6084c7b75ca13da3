# src/faaschain/core/config/errors.py
"""
Exceções da camada de configuração do faaschain.

Este módulo define a hierarquia de exceções levantadas ao carregar,
mesclar e interpretar a configuração de uma chain (gateway, nome,
encoding e steps declarativos).

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Erros estruturais são falhas fatais, sem fallback
    - Mensagens apontam a chave ou o arquivo problemático

Invariantes:
    - Todas as exceções herdam de `ConfigError`
    - Nenhuma exceção aqui representa falha de encoding ou de execução
"""

from faaschain.core.exceptions import FaaschainError


class ConfigError(FaaschainError):
    """Exceção base para erros de configuração."""


class DefaultsNotFoundError(ConfigError):
    """
    O arquivo de configuração base (defaults) não existe.

    O defaults é obrigatório; o override local é opcional.
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Extensão de arquivo de configuração não suportada.

    Formatos suportados:
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """O conteúdo raiz da configuração não é um dicionário."""


class ConfigTypeConflictError(ConfigError):
    """
    Conflito de tipos entre defaults e override durante o deep-merge.

    Exemplo de conflito:
        - base:     {"gateway": {"url": "http://gw"}}
        - override: {"gateway": "http://other"}
    """


class InvalidChainConfigError(ConfigError):
    """
    Seções `gateway`, `chain` ou `encoding` estruturalmente inválidas.

    Inclui steps declarativos malformados (ação ausente, ação ambígua,
    tipos incorretos em headers/query).
    """
