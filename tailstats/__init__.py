"""Heavy-tail convergence toolkit.

Simulates random variables with pathological tails (e.g. the reciprocal of a
squared standard Gaussian, whose mean is infinite), tracks running means and
medians as the sample grows, and applies log / Box-Cox transforms that bring
such samples back to well-behaved, standardized values.
"""

__all__ = [
    "config",
    "core",
    "report",
    "utils",
]
