from .settings import StreamConfig

__all__ = ['StreamConfig']
