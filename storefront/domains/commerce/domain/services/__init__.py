"""
Commerce Domain Services
"""

from .pricing_service import PricedLine, PricingService

__all__ = ["PricingService", "PricedLine"]
