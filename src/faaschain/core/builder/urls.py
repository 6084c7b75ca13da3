# src/faaschain/core/builder/urls.py
"""
Derivação das URLs de invocação da chain no gateway.

Cada chain possui dois endpoints, calculados uma única vez na construção
do builder:

    - síncrono:   {gateway}/function/{chain}
    - assíncrono: {gateway}/async-function/{chain}

O prefixo e o nome da chain são unidos ao path já existente do gateway
(barras repetidas ou finais são normalizadas); query e fragmento do
endereço base são preservados. O nome da chain é percent-escapado como um
segmento único (`a?b` vira `a%3Fb`).

Decisão: endereços sem esquema ou host são rejeitados com
`InvalidGatewayUrlError`, em vez de produzir um endpoint quebrado.
"""

from __future__ import annotations

import posixpath
from urllib.parse import quote, urlsplit, urlunsplit

from faaschain.core.exceptions import InvalidGatewayUrlError

SYNC_PREFIX = "function"
ASYNC_PREFIX = "async-function"


def join_gateway_path(gateway: str, prefix: str, chain_name: str) -> str:
    if not isinstance(chain_name, str) or not chain_name.strip():
        raise InvalidGatewayUrlError("chain name must be a non-empty string")

    try:
        parts = urlsplit(gateway)
    except (TypeError, ValueError, AttributeError) as e:
        raise InvalidGatewayUrlError(f"Endereço de gateway inválido: {gateway!r} ({e})") from e

    if not parts.scheme or not parts.netloc:
        raise InvalidGatewayUrlError(
            f"Endereço de gateway deve conter esquema e host, recebido: {gateway!r}"
        )

    # o nome da chain é um único segmento de path, escapado por completo
    segment = quote(chain_name, safe="")
    if segment in (".", ".."):
        raise InvalidGatewayUrlError(f"chain name cannot be a relative path segment: {chain_name!r}")

    path = posixpath.normpath(posixpath.join(parts.path or "/", f"{prefix}/{segment}"))
    # normpath preserva "//" inicial (POSIX); o path de URL não deve
    if path.startswith("//"):
        path = "/" + path.lstrip("/")

    return urlunsplit((parts.scheme, parts.netloc, path, parts.query, parts.fragment))


def function_url(gateway: str, chain_name: str) -> str:
    return join_gateway_path(gateway, SYNC_PREFIX, chain_name)


def async_function_url(gateway: str, chain_name: str) -> str:
    return join_gateway_path(gateway, ASYNC_PREFIX, chain_name)
