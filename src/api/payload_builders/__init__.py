"""Payload builders por canal — construção de payloads para APIs externas.

Estrutura:
- feishu/: webhook do bot customizado Feishu/Lark

Cada canal tem seus próprios builders, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
