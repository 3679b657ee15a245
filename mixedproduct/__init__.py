"""
Lazy Cartesian products that advance every input on every step.
"""
from .exceptions import (
    ConfigError,
    MixedProductError,
    PeriodAlreadyFixedError,
    SpentError,
)
from .odometer import Odometer
from .period import Level, PeriodTable, coprime_period, lcm, lcml
from .product import EMPTY_PRODUCT, MixedProduct, mixed_product
from .sequence import END, Sequence, SequenceCursor

__version__ = '0.1.0'
