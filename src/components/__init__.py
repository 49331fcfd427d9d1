"""
Render components for the item change overlay
"""

from .render_adapter import IRenderAdapter
from .console_card_renderer import ConsoleCardRenderer

__all__ = ['IRenderAdapter', 'ConsoleCardRenderer']
