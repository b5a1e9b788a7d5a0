"""
Core Domain Layer - O Hexágono.

Modelo de domínio do diretório organizacional: departamentos,
locais, cargos e suas associações.
Características:
- Zero dependências externas (Django, SQLAlchemy, etc.)
- 100% testável sem banco de dados
- Erros esperados trafegam como Result, não como exceção
"""
