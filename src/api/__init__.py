"""API: camada de borda HTTP.

Responsabilidades:
- Expor o plano de controle do módulo celular
- Validar payloads de entrada (pydantic)
- Mapear erros de infraestrutura para respostas HTTP

NÃO PODE conter: roteamento de frames, regras de correlação, fan-out.
"""
