"""커스텀 위젯"""

from .toolbar_button import ToolbarButton

__all__ = ['ToolbarButton']
