"""
Pseudo-random deviates.

Provides a seedable uniform generator (minimal standard generator with a
Bays-Durham shuffle) and exponential, normal, gamma and logistic
deviates derived from it.

Usage:
    from pylsq.deviates import DeviateGenerator

    gen = DeviateGenerator()
    z = gen.normal(42, 0.0, 1.0, True)      # start a sequence
    z2 = gen.normal(42, 0.0, 1.0, False)    # continue it
"""

from pylsq.deviates.generator import DeviateGenerator, coerce_seed

__all__ = [
    "DeviateGenerator",
    "coerce_seed",
]
