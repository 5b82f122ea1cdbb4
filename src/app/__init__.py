"""App — orquestração do envio em lote e composição da aplicação.

Subpastas:
- bootstrap/: composition root (logging, settings, wiring)
- use_cases/: casos de uso (lote de webhooks, sem IO direto)
- protocols/: contratos/interfaces e modelos de entrada/saída
- observability/: correlation_id para logs estruturados
- constants/: constantes do Feishu (msg_type, modos, tags)

Padrão: app executa; api adapta; config configura.
"""
