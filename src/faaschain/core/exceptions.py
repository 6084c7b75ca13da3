# src/faaschain/core/exceptions.py
"""
Exceções canônicas do faaschain.

Este módulo define a hierarquia de exceções tipadas levantadas pelo core
durante a construção, composição declarativa e decodificação de chains.

Regras:
- A única falha de runtime do builder é a falha de encoding em `build()`,
  e ela **não** pertence a esta hierarquia: é propagada sem reembrulho.
- As exceções aqui definidas representam violações estruturais detectadas
  antes de qualquer execução (endereço inválido, nomes desconhecidos,
  definições corrompidas).
"""


class FaaschainError(Exception):
    """Exceção base para erros estruturais do faaschain."""


class InvalidGatewayUrlError(FaaschainError, ValueError):
    """
    Endereço do gateway não pode ser usado para derivar as URLs da chain.

    Levantada na construção do builder quando o endereço não possui
    esquema e host, ou quando o nome da chain é vazio.

    Decisões arquiteturais:
        - Endereços malformados falham na construção, nunca silenciosamente
        - Nenhuma URL parcial é armazenada no builder
    """


class DuplicateModifierNameError(FaaschainError, ValueError):
    """Nome já registrado no ModifierRegistry."""


class UnknownModifierError(FaaschainError, KeyError):
    """
    Referência a um modifier ou handler não registrado.

    Ocorre durante a composição declarativa, quando um step de config
    aponta para um nome ausente do registry.
    """

    def __str__(self) -> str:
        # KeyError formata a mensagem com repr(); aqui queremos o texto puro
        return str(self.args[0]) if self.args else ""


class DefinitionDecodeError(FaaschainError, ValueError):
    """Definição codificada não pode ser reconstruída como Chain."""
