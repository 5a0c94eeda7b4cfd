from .cohort_price_source import CohortPriceSource

__all__ = ["CohortPriceSource"]
