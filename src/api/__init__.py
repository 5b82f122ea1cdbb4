"""API — camada de borda do bot customizado Feishu/Lark.

Responsabilidades:
- Construir o corpo do webhook por tipo de mensagem
- Assinar (HMAC) e entregar ao webhook
- Validar itens antes do build
- Expor endpoints HTTP (envio em lote, health)

Subpastas:
- connectors/: cliente HTTP, assinatura e erros do webhook
- payload_builders/: construção do documento por msg_type
- validators/: validação de itens e opções de campos
- routes/: endpoints HTTP

NÃO PODE conter: orquestração de lote ou regras de continue_on_fail.
"""
