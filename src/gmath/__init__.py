"""
gmath — elementary mathematics from first principles.

Complex-number arithmetic and scalar functions (sqrt, power, exp, ln, trig,
inverse trig, factorial, rounding, quadratic roots) computed by explicit
numerical algorithms rather than platform math primitives.

Invalid arguments are signaled by the sentinel -1 (DOMAIN_ERROR), never by
exceptions.
"""
