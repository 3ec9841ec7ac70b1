"""Encaminhamento HTTP para backends de IA e serviços internos."""

from .forward import forward_request

__all__ = ["forward_request"]
