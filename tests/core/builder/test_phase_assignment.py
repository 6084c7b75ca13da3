# tests/core/builder/test_phase_assignment.py
"""
Testes do algoritmo de atribuição de fases do ChainBuilder.

Este módulo valida a regra que decide, a cada chamada do builder, se a
unidade entra na fase corrente ou abre uma nova fase:

- `apply` assíncrono abre uma nova fase, exceto quando a última fase foi
  criada apenas para hospedar um modifier/callback com a chain vazia
  (fase placeholder), caso em que a função é incorporada a ela
- `apply` síncrono sempre usa a última fase (criando uma se necessário)
- modifiers e callbacks usam a última fase; com a chain vazia criam a
  fase placeholder
- o marcador de placeholder pertence a cada builder

Invariantes:
    - Fases e unidades só são adicionadas ao final
    - A mesma sequência de chamadas produz sempre a mesma forma de chain

Limites explícitos:
    - Não valida encoding (ver test_build_definition.py)
    - Não valida resolução de opções (ver test_options_resolution.py)
"""

import pytest

try:
    from faaschain.core.builder.builder import ChainBuilder
    from faaschain.core.builder.options import SYNC, header
except Exception as e:  # noqa: BLE001
    ChainBuilder = None
    SYNC = None
    header = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing ChainBuilder. Implement:\n"
            "- src/faaschain/core/builder/builder.py (ChainBuilder)\n"
            "- src/faaschain/core/builder/options.py (SYNC, header)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_async_applies_create_one_phase_each(new_builder, summarize):
    """
    Verifica que `apply` assíncrono abre uma nova fase por chamada.

    Cenário: new("http://gw", "c1"); apply("f1"); apply("f2").
    Resultado esperado: 2 fases, cada uma com 1 função (f1, depois f2).
    """
    _require_imports()
    fc = new_builder()
    fc.apply("f1")
    fc.apply("f2")

    assert summarize(fc.chain) == [
        [("function", "f1")],
        [("function", "f2")],
    ]


def test_many_async_applies_never_share_a_phase(new_builder):
    _require_imports()
    fc = new_builder()
    names = [f"f{i}" for i in range(6)]
    for n in names:
        fc.apply(n, header("X-Step", n))

    assert fc.chain.count_phases() == len(names)
    assert [p.count_units() for p in fc.chain.phases] == [1] * len(names)
    assert [p.units[0].function for p in fc.chain.phases] == names


def test_modifier_on_empty_chain_is_folded_with_next_async_apply(new_builder, identity_modifier, summarize):
    """
    Verifica que a primeira função assíncrona preenche a fase placeholder.

    Cenário: new("http://gw", "c1"); apply_modifier(t); apply("f1").
    Resultado esperado: 1 fase contendo [modifier(t), function(f1)].
    """
    _require_imports()
    fc = new_builder()
    fc.apply_modifier(identity_modifier)
    fc.apply("f1")

    assert summarize(fc.chain) == [[("modifier", None), ("function", "f1")]]
    assert fc.chain.get_phase(0).units[0].transform is identity_modifier


def test_sync_applies_share_a_single_phase(new_builder, summarize):
    """
    Verifica que chamadas síncronas nunca criam fases adicionais.

    Cenário: new("http://gw", "c1"); apply("f1", Sync); apply("f2", Sync).
    Resultado esperado: 1 fase contendo [f1, f2].
    """
    _require_imports()
    fc = new_builder()
    fc.apply("f1", SYNC)
    fc.apply("f2", SYNC)
    fc.apply("f3", SYNC)

    assert summarize(fc.chain) == [[
        ("function", "f1"),
        ("function", "f2"),
        ("function", "f3"),
    ]]


def test_sync_apply_joins_previous_async_phase(new_builder, summarize):
    _require_imports()
    fc = new_builder()
    fc.apply("f1").apply("f2", SYNC).apply("f3")

    assert summarize(fc.chain) == [
        [("function", "f1"), ("function", "f2")],
        [("function", "f3")],
    ]


def test_callback_on_empty_chain_creates_placeholder_phase(new_builder, summarize):
    _require_imports()
    fc = new_builder()
    fc.callback("http://hooks/partial")
    assert fc.has_placeholder_phase is True

    fc.apply("f1")
    assert fc.has_placeholder_phase is False
    assert summarize(fc.chain) == [[("callback", "http://hooks/partial"), ("function", "f1")]]


def test_placeholder_only_absorbs_the_first_async_apply(new_builder, identity_modifier, summarize):
    """
    Verifica que o marcador de placeholder é consumido pela primeira função.

    Após o primeiro `apply`, o marcador volta a False e o `apply`
    assíncrono seguinte abre uma nova fase normalmente.
    """
    _require_imports()
    fc = new_builder()
    fc.apply_modifier(identity_modifier).apply("f1").apply("f2")

    assert summarize(fc.chain) == [
        [("modifier", None), ("function", "f1")],
        [("function", "f2")],
    ]


def test_modifier_on_non_empty_chain_does_not_create_placeholder(new_builder, identity_modifier, summarize):
    """
    Verifica que modifiers em chain não vazia entram na última fase sem
    marcar placeholder; o `apply` assíncrono seguinte abre nova fase.
    """
    _require_imports()
    fc = new_builder()
    fc.apply("f1")
    fc.apply_modifier(identity_modifier)
    assert fc.has_placeholder_phase is False

    fc.apply("f2")
    assert summarize(fc.chain) == [
        [("function", "f1"), ("modifier", None)],
        [("function", "f2")],
    ]


def test_consecutive_placeholder_units_keep_the_flag(new_builder, identity_modifier, summarize):
    _require_imports()
    fc = new_builder()
    fc.apply_modifier(identity_modifier)
    fc.callback("http://hooks/a")
    fc.apply_modifier(identity_modifier)
    assert fc.has_placeholder_phase is True

    fc.apply("f1")
    assert summarize(fc.chain) == [[
        ("modifier", None),
        ("callback", "http://hooks/a"),
        ("modifier", None),
        ("function", "f1"),
    ]]


def test_sync_apply_on_placeholder_phase_resets_flag(new_builder, identity_modifier, summarize):
    """
    Verifica que um `apply` síncrono também consome o marcador.

    O ramo síncrono ignora o marcador ao escolher a fase, mas o reset
    é incondicional: o `apply` assíncrono seguinte abre nova fase.
    """
    _require_imports()
    fc = new_builder()
    fc.apply_modifier(identity_modifier)
    fc.apply("f1", SYNC)
    assert fc.has_placeholder_phase is False

    fc.apply("f2")
    assert summarize(fc.chain) == [
        [("modifier", None), ("function", "f1")],
        [("function", "f2")],
    ]


def test_placeholder_flag_is_scoped_per_builder(new_builder, identity_modifier, summarize):
    """
    Verifica que builders intercalados não compartilham o marcador.

    O builder `a` cria uma fase placeholder; o builder `b`, construído em
    seguida na mesma thread, deve ignorar completamente esse estado.
    """
    _require_imports()
    a = new_builder("chain-a")
    b = new_builder("chain-b")

    a.apply_modifier(identity_modifier)
    b.apply("f1")
    b.apply("f2")
    a.apply("g1")

    assert summarize(b.chain) == [[("function", "f1")], [("function", "f2")]]
    assert summarize(a.chain) == [[("modifier", None), ("function", "g1")]]


def test_mutating_calls_return_the_builder(new_builder, identity_modifier):
    _require_imports()
    fc = new_builder()
    assert fc.apply("f1") is fc
    assert fc.apply_modifier(identity_modifier) is fc
    assert fc.callback("http://hooks/x") is fc
    assert fc.on_failure(lambda err: None) is fc
    assert fc.finally_(lambda: None) is fc
    assert fc.set_id("req-1") is fc


def test_phases_are_only_appended(new_builder):
    _require_imports()
    fc = new_builder()
    fc.apply("f1")
    first = fc.chain.get_phase(0)
    fc.apply("f2").apply("f3", SYNC)

    assert fc.chain.get_phase(0) is first
    assert [u.function for u in first.units] == ["f1"]
    assert [u.function for u in fc.chain.get_last_phase().units] == ["f2", "f3"]
