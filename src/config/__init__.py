"""
Configuração do projeto DirectService.

Módulos:
- settings: Variáveis de ambiente e LOGGING
- logging_config: Aplicação do dictConfig
- container: Dependency Injection Container
"""
