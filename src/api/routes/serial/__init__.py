"""Rotas de controle do módulo serial (SMS, modo avião, reboot, status)."""
