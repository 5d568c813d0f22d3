"""Domain entities.

Element records for COLLADA documents: slots, optics, transformations,
asset metadata and the scene graph.
"""

from .asset import Asset, UpAxis
from .extra import ExtraTechnique
from .field_slot import FieldSlot, SlotTable
from .optic import Optic, OpticKind
from .scene import Camera, ColladaDocument, Node, NodeType, VisualScene
from .transformation import (
    Lookat,
    Matrix,
    Rotate,
    Scale,
    Skew,
    Transformation,
    TransformationKind,
    Translate,
)

__all__ = [
    # Slots
    "FieldSlot",
    "SlotTable",
    # Records
    "Asset",
    "UpAxis",
    "ExtraTechnique",
    "Optic",
    "OpticKind",
    # Transformations
    "Lookat",
    "Matrix",
    "Rotate",
    "Scale",
    "Skew",
    "Transformation",
    "TransformationKind",
    "Translate",
    # Scene graph
    "Camera",
    "ColladaDocument",
    "Node",
    "NodeType",
    "VisualScene",
]
