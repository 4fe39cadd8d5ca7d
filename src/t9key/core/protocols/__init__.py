from .provider import PinyinProvider

__all__ = ["PinyinProvider"]
