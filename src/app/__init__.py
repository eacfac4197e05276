"""App — coração do sistema: orquestração, casos de uso e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- coordinators/: fluxos end-to-end (mensagem classificada → use case)
- use_cases/: casos de uso (admissão, dedupe, thread, espelhamento)
- infra/: implementações concretas de IO (Mapping Store)
- protocols/: contratos/interfaces
- observability/: logs estruturados, correlation_id, métricas

Padrão: app executa; api adapta; config configura; utils apoia.
"""
