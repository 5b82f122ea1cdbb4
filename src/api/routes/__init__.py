"""Rotas HTTP da API — adapters de entrada.

Responsabilidades:
- Definir endpoints HTTP (envio Feishu, health)
- Validação inicial de request (pydantic)
- Delegação para use cases
- Respostas HTTP apropriadas

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
