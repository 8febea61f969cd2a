"""
Shape catalogue: what each calculator makes and where it is used.
"""

from types import MappingProxyType

from .models import ShapeType

SHAPE_INFO = MappingProxyType({
    ShapeType.CYLINDER: {
        "title": "Cylindrical Tank",
        "description": "Straight tubular shell with parallel circular ends. The most common form in "
                       "plate work: easy to roll and strong under pressure.",
        "application": "Liquid and gas storage, pressure vessels, process piping and silos.",
        "key_params": ["Internal Diameter", "Height", "Plate Thickness"],
    },
    ShapeType.CONE: {
        "title": "Cone",
        "description": "Solid that tapers from a flat circular base toward an apex, or to a smaller "
                       "parallel circle (frustum).",
        "application": "Hoppers, pipe reducers, grain silos and cyclone separators.",
        "key_params": ["Large Diameter", "Small Diameter", "Vertical Height"],
    },
    ShapeType.SQUARE_TO_ROUND: {
        "title": "Square to Round",
        "description": "Transition piece joining a square or rectangular section to a circular one.",
        "application": "Ventilation ducts, exhaust fan connections and hoppers.",
        "key_params": ["Base (Width)", "Top Diameter", "Height"],
    },
    ShapeType.ELBOW: {
        "title": "Segmented Elbow",
        "description": "Pipe bend built from several angled cuts (gores) of straight cylindrical pipe.",
        "application": "Changes of direction in large-bore piping where formed bends are not available.",
        "key_params": ["Diameter", "Bend Radius", "Angle", "Number of Segments"],
    },
    ShapeType.OFFSET: {
        "title": "Offset",
        "description": "Two mitred bends joining two parallel, misaligned pipes.",
        "application": "Routing industrial piping (water, steam, gas) around obstacles.",
        "key_params": ["Offset (Set)", "Run", "Diameter"],
    },
    ShapeType.PIPE_BRANCHING: {
        "title": "Pipe Branch",
        "description": "Saddle (fish-mouth) cut template for a branch pipe meeting a header at an angle.",
        "application": "Tees, laterals and nozzles on piping and vessels.",
        "key_params": ["Header Diameter", "Branch Diameter", "Angle"],
    },
    ShapeType.ARC_CALCULATOR: {
        "title": "Arc / Rolling",
        "description": "Radius, central angle and blank length of a rolled arc from chord and rise, "
                       "or from radius and chord.",
        "application": "Rolling plate and sections, curved frames and arches.",
        "key_params": ["Chord", "Sagitta", "Radius"],
    },
    ShapeType.BRACKET: {
        "title": "Knee Brace",
        "description": "Triangular support used to carry shelves and benches or to stiffen structures.",
        "application": "Load supports, structural bracing and bench assembly.",
        "key_params": ["Height", "Base", "Applied Load", "Profile"],
    },
    ShapeType.BOLTS: {
        "title": "Bolt Strength",
        "description": "Load capacity and tightening torque for structural bolts of different property classes.",
        "application": "Flanged joints, machine fixing and steel structures.",
        "key_params": ["Diameter", "Class", "Quantity", "Load"],
    },
    ShapeType.STAIRS: {
        "title": "Industrial Stair",
        "description": "Complete sizing of straight stairs: treads, risers and stringers, "
                       "checked against the comfort rule.",
        "application": "Access to platforms, mezzanines and upper levels in plants.",
        "key_params": ["Total Height", "Available Base", "Width"],
    },
    ShapeType.PLATE_WEIGHT: {
        "title": "Plate Weight",
        "description": "Weight of flat plates in different materials.",
        "application": "Quoting, transport planning and structural sizing.",
        "key_params": ["Width", "Length", "Thickness", "Material"],
    },
    ShapeType.VOLUMES: {
        "title": "Volumes and Areas",
        "description": "Quick capacity and surface area of basic solids.",
        "application": "Paint and lining estimates, storage capacity.",
        "key_params": ["Shape Type", "Dimensions"],
    },
})


def describe(shape: ShapeType) -> dict:
    """Catalogue entry for a shape, with its id."""
    return {"id": shape.value, **SHAPE_INFO[shape]}
