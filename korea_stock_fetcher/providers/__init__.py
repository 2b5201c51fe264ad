from .naver_provider import NaverFinanceProvider

__all__ = ["NaverFinanceProvider"]
