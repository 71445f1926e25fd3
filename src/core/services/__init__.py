"""Casos de uso del Core (orquestación sin efectos de UI)."""
