# src/atlas_params/core/__init__.py
"""
Core do Atlas Params.

Este pacote contém a implementação canônica do motor de resolução de
parâmetros, reunindo as responsabilidades essenciais para avaliar
visibilidade, ordenar dependências, resolver valores efetivos e
reportar issues de validação.

O core é projetado para ser:
    - determinístico
    - puramente funcional sobre suas entradas explícitas
    - testável de forma isolada
    - livre de dependências de UI, transporte ou persistência

Componentes principais:
    - values     → caminhos tipados e clonagem estrutural
    - schema     → descrição declarativa de campos e grupos
    - resolution → avaliador de visibilidade, grafo de dependências,
                   solver de ordem e resolvedor da árvore de parâmetros
    - validation → validador de issues e merge de relatórios
    - context    → store de contexto por execução
    - config     → política de resolução configurável
    - engine     → fachada que integra registry, política e resolução

Princípios fundamentais:
    - Nenhuma decisão silenciosa: erros estruturais do schema são fatais
    - Schemas e valores de entrada nunca são mutados
    - Cada chamada aloca estruturas de saída novas

Este pacote existe como a fonte de verdade operacional do Atlas Params.
"""
