"""Core do bridge: roteamento, handlers, correlação e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- coordinators/serial/: router, handlers por tipo, correlator e fan-out
- domain/: modelos de payload e renderização de notificações
- services/: plano de controle do módulo (comandos)
- runtime/: execução de tasks destacadas
- infra/: stores e senders de canal concretos
- protocols/: contratos/interfaces
- observability/: correlation_id e métricas em log

Padrão: app executa; api adapta; utils apoia.
"""
