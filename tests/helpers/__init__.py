"""Test helpers module for shared test utilities.

- reference: independent Decimal computations to check results against
"""

from tests.helpers.reference import decimal_reference, exact_product

__all__ = ["decimal_reference", "exact_product"]
