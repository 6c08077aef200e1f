"""Provider-agnostic building blocks: errors, DTOs, transport, logging and adapter bases.

Submodules are imported explicitly by their users. This package module
imports nothing, so ``config`` can depend on ``base.errors`` without an
import cycle.
"""
