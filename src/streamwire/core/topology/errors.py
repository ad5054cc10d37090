# src/streamwire/core/topology/errors.py
"""
Exceções da leitura de descrições de topologia.

Todas as falhas ao carregar ou interpretar um arquivo de descrição de
topologia herdam de `TopologyDescriptionError`, permitindo captura
genérica pelo chamador.

Limites explícitos:
    - Não representam falhas de fiação (essas são dados do ValidationResult)
    - Não realizam fallback ou recovery
"""


class TopologyDescriptionError(Exception):
    """Exceção base para descrições de topologia inválidas ou ilegíveis."""


class TopologyFileNotFoundError(TopologyDescriptionError):
    """O arquivo de descrição não existe no caminho informado."""


class UnsupportedTopologyFormatError(TopologyDescriptionError):
    """
    A extensão do arquivo não é suportada.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidTopologyDescriptionError(TopologyDescriptionError):
    """
    O conteúdo da descrição não respeita a estrutura esperada.

    Exemplos:
        - raiz que não é um mapa
        - componente sem `id`
        - `role` desconhecido
        - entrada sem `component`
    """
