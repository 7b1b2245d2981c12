"""Application layer: DTOs, ports, services and use cases.

Depends on the domain layer only; infrastructure plugs in through the
Protocols in pastebox.application.interfaces.
"""
