"""
Battery Runtime Optimizer
=========================

Planning tool that splits a finite pool of stored energy between a fleet
of constant-draw devices and reports how long they can run:
- Simple pool: one undifferentiated battery bank
- Simultaneous baseline: one whole battery per device, no sharing
- Optimized: all batteries pooled, runtime equalized across devices
- Priority: guaranteed minimum runtime plus weighted surplus

Architecture:
- resources/: Device and battery models
- optimization/: Allocation engine (solver, allocators, comparator)
- planning/: Request models, policy dispatch, feasibility, CLI
"""

__version__ = "1.0.0"
