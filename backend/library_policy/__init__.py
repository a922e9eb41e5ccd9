"""
Motor de políticas de circulação da biblioteca.

Regras de empréstimo, renovação, multas, validade de associação
e importação de acervo em lote via CSV.
"""

__version__ = "0.1.0"
