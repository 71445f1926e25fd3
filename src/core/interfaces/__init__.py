"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan el dominio y los adaptadores.
- Permite invertir dependencias: el Core depende de abstracciones.
"""
