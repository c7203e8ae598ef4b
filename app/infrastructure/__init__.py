"""
Capa de Infraestructura - Reservaciones de propiedades.

Esta capa contiene las implementaciones concretas de los puertos (interfaces).

Estructura:
- db/: Tablas, engine y repositorio SQL
- storage/: Adaptador S3 para documentos de identidad
- in_memory/: Implementaciones in-memory para desarrollo y testing
"""
