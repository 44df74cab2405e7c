# interaction/states.py
from enum import Enum

class DragState(Enum):
    IDLE = "idle"
    ARMED = "armed"          # pointer went down inside the disk
    DRAGGING = "dragging"
    SNAPPED = "snapped"      # dragging while held by a snap point
