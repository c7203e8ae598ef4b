"""
Integration tests package.

Tests de integración que verifican:
- El repositorio SQL contra SQLite (aiosqlite)
- Los endpoints de health check

Para ejecutar solo tests de integración:
    pytest tests/integration/
"""
