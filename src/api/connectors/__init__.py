"""Connectors — adapters de borda para APIs externas.

Estrutura:
- slack/: Events API (assinatura, parsing e classificação do webhook)
- slashwork/: API GraphQL de destino (createPost, createComment)

Cada lado tem seu próprio connector, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
