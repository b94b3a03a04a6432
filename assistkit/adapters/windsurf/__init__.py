from .hooks import WindsurfHooksAdapter

__all__ = ['WindsurfHooksAdapter']
