"""Rotas de configuração dos canais de notificação."""
