"""Validators por canal — validação de entradas antes do build.

Estrutura:
- feishu/: webhook do bot customizado Feishu/Lark

Cada canal tem seus próprios validators, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
