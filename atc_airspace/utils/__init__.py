from .composite_map import CompositeMap

__all__ = ['CompositeMap']
