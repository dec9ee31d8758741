"""
SSE counter stream demo
"""
__version__ = '0.1.0'
