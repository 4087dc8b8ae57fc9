"""
Core services: the management facade, id generation and the error types
shared by every layer. Import `RestoOPS_V1.core.system` for the facade.
"""
