"""Utilitários compartilhados entre as camadas."""
