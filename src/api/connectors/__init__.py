"""Connectors por canal — adapters de borda para APIs externas.

Estrutura:
- feishu/: webhook do bot customizado Feishu/Lark

Cada canal tem seu próprio connector, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
