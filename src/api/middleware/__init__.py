"""Middlewares HTTP compartilhados pelos serviços."""

from api.middleware.cors import build_cors_headers
from api.middleware.envelope import EnvelopePolicy, ServiceEnvelopeMiddleware

__all__ = ["EnvelopePolicy", "ServiceEnvelopeMiddleware", "build_cors_headers"]
