# tests/core/encoding/test_decode_definition.py
"""
Testes do decoder estrutural de definições.

O decoder reconstrói fases e unidades para inspeção pela camada de
dispatch; modifiers voltam sem transform e handlers não são restaurados.
Entradas malformadas levantam `DefinitionDecodeError`.
"""

import pytest

try:
    from faaschain.core.builder.options import SYNC, query
    from faaschain.core.chain import UnitKind
    from faaschain.core.encoding import decode_definition
    from faaschain.core.exceptions import DefinitionDecodeError
except Exception as e:  # noqa: BLE001
    decode_definition = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing decoder. Implement:\n"
            "- src/faaschain/core/encoding/decoder.py (decode_definition)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_decode_restores_phases_units_and_order(new_builder, identity_modifier):
    _require_imports()
    fc = new_builder()
    fc.callback("http://hooks/start")
    fc.apply("f1", query("k", "a", "b"))
    fc.apply("f2")
    fc.apply_modifier(identity_modifier)
    fc.apply("f3", SYNC)
    fc.on_failure(lambda err: None)
    fc.build()

    decoded = decode_definition(fc.definition.encode("utf-8"))

    assert decoded.count_phases() == fc.chain.count_phases() == 2
    assert [[u.kind for u in p.units] for p in decoded.phases] == [
        [UnitKind.CALLBACK, UnitKind.FUNCTION],
        [UnitKind.FUNCTION, UnitKind.MODIFIER, UnitKind.FUNCTION],
    ]
    assert decoded.get_phase(0).units[1].param == {"k": ["a", "b"]}
    assert decoded.get_phase(1).units[1].transform is None
    assert decoded.failure_handler is None


@pytest.mark.parametrize(
    "payload",
    [
        b"",
        "   ",
        "{not json",
        b"\xff\xfe",
        "[1, 2]",
        '{"phases": [{"functions": [{"kind": "shell"}]}]}',
    ],
)
def test_malformed_definitions_raise(payload):
    _require_imports()
    with pytest.raises(DefinitionDecodeError):
        decode_definition(payload)


def test_definition_without_phases_decodes_to_empty_chain():
    _require_imports()
    assert decode_definition("{}").count_phases() == 0
