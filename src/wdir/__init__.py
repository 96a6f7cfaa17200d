from __future__ import annotations

"""
wdir: a directory lister in the style of the Windows 'dir' command.
"""

__version__ = "1.0.0"
