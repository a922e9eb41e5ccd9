"""
Utilitários de datas e formatação.
"""
