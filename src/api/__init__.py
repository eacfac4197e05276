"""API — camada de borda: Slack de entrada, Slashwork de saída.

Responsabilidades:
- Receber eventos do Slack (webhook)
- Validar assinaturas e payloads
- Normalizar mensagens Slack para markdown e modelos internos
- Executar mutations GraphQL no Slashwork

Subpastas:
- connectors/: adapters HTTP (slack, slashwork)
- normalizers/: conversão de payloads externos → modelos internos
- routes/: endpoints HTTP (webhook, health)

NÃO PODE conter: regras de dedupe, resolução de thread, orquestração de use cases.
"""
