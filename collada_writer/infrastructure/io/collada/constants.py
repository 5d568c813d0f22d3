from ....constants import Constraints

COLLADA_NS = "http://www.collada.org/2005/11/COLLADASchema"
COLLADA_VERSION = Constraints.COLLADA_VERSION

ELEMENT_COLLADA = "COLLADA"
ELEMENT_ASSET = "asset"
ELEMENT_CONTRIBUTOR = "contributor"
ELEMENT_UNIT = "unit"
ELEMENT_LIBRARY_CAMERAS = "library_cameras"
ELEMENT_CAMERA = "camera"
ELEMENT_OPTICS = "optics"
ELEMENT_TECHNIQUE_COMMON = "technique_common"
ELEMENT_TECHNIQUE = "technique"
ELEMENT_EXTRA = "extra"
ELEMENT_LIBRARY_VISUAL_SCENES = "library_visual_scenes"
ELEMENT_VISUAL_SCENE = "visual_scene"
ELEMENT_NODE = "node"
ELEMENT_INSTANCE_CAMERA = "instance_camera"
ELEMENT_SCENE = "scene"
ELEMENT_INSTANCE_VISUAL_SCENE = "instance_visual_scene"

ATTRIBUTE_ID = "id"
ATTRIBUTE_METER = "meter"
ATTRIBUTE_NAME = "name"
ATTRIBUTE_SID = "sid"
ATTRIBUTE_TYPE = "type"
ATTRIBUTE_URL = "url"
ATTRIBUTE_PROFILE = "profile"
ATTRIBUTE_VERSION = "version"
ATTRIBUTE_XMLNS = "xmlns"
