from lv_ui.wiring.dependencies import UIContext

__all__ = ["UIContext"]
