"""
Core value types and numeric algorithms.

- fermat.core.math: scalar primitives, configuration, errors, algorithms
- fermat.core.domain: immutable value models (Complex, Vector, Matrix,
  Fraction, geometry shapes)
"""
