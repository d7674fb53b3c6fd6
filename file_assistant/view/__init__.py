# ==============================================
# VIEW (side panel)
# ==============================================
#
# Modules:
# --------
# - panel.py  → Update payloads, text rendering, console panel
#
# ==============================================

from .panel import ConsolePanel, build_update_message, render_record

__all__ = [
    "ConsolePanel",
    "build_update_message",
    "render_record"
]
