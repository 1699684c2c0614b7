from wrapped.wrapped import Wrapped, wrap

__all__ = ['Wrapped', 'wrap']
