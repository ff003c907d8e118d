"""
closurekit — closures, higher-order functions and validators.

Layout:
- closurekit.core.math      : factorial / is_prime / power + DomainError
- closurekit.closures       : counters, multipliers, accumulators
- closurekit.pipeline       : apply / filter_seq / fold / compose, Pipeline
- closurekit.process        : process identity, aliasing demo
- closurekit.demo           : driver sequence
"""

__version__ = "0.1.0"
