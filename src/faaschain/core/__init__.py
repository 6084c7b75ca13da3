# src/faaschain/core/__init__.py
"""
Core do faaschain.

Este pacote reúne a implementação canônica do modelo de chain e do
builder que o constrói incrementalmente.

O core é projetado para ser:
    - determinístico
    - testável de forma isolada
    - livre de I/O de rede e de dependências de execução
    - orientado a contratos explícitos

Componentes principais:
    - chain      → unidades executáveis (Function, Modifier, Callback), Phase e Chain
    - builder    → opções por chamada, URLs do gateway e atribuição de fases
    - encoding   → encoder JSON padrão, decoder e hash da definição
    - config     → resolução de configuração (merge, validação estrutural, hashing)
    - exceptions → hierarquia de exceções tipadas

Princípios fundamentais:
    - Nenhuma decisão silenciosa: toda atribuição de fase é explícita e registrada
    - Estado de construção pertence a cada builder (nada global)
    - Falhas de encoding são propagadas sem reembrulho

Limites explícitos:
    - Não executa fases nem handlers
    - Não depende de transporte HTTP ou do gateway
"""
