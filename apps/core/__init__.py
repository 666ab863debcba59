"""
Core App - Shared building blocks

Public event identifiers, money helpers in integer centavos, and the
project-wide DRF exception handler that shapes every error as
``{"error": "<message>"}``.
"""
