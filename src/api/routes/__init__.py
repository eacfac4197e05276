"""Rotas HTTP da API — adapters de entrada.

Responsabilidades:
- Definir endpoints HTTP (webhook Slack, health)
- Validação inicial de request (assinatura, JSON)
- Delegação para connectors/use_cases

Estrutura:
- routes/slack/: Events API do Slack
- routes/health/: health checks e readiness

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
