"""faaschain — Encoding (core).

Componentes canônicos da definição transmissível:
 - encoding (contrato `ChainEncoder` + `JsonChainEncoder`)
 - decoding estrutural (`decode_definition`)
 - hashing da definição (rastreabilidade)
"""

from .decoder import decode_definition  # noqa: F401
from .encoder import ChainEncoder, JsonChainEncoder  # noqa: F401
from .hashing import compute_definition_hash  # noqa: F401
