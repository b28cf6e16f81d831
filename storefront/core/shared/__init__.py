from storefront.core.shared.logger import JSONFormatter, setup_logging

__all__ = ["JSONFormatter", "setup_logging"]
