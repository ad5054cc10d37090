# src/streamwire/core/__init__.py
"""
Core do streamwire.

O core reúne o modelo de topologia, o validador de fiação e as camadas
de configuração e submissão que o consomem.

O validador é projetado para ser:
    - puro (sem efeitos colaterais, sem I/O)
    - determinístico
    - seguro para chamadas concorrentes sobre a mesma topologia
"""
