"""legibility_checker.core: the colour decision engine.

Colour model, blending, contrast guarantee, logo advisory, ColorContext,
report formatting and settings. This package has NO dependencies on
legibility_checker.commands or legibility_checker.registry.
Only stdlib, numpy, and PIL are allowed here.
"""
