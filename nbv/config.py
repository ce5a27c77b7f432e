# Configuration constants for frontier clustering and frustum checks

DEFAULT_HORIZONTAL_FOV = 90.0  # degrees
DEFAULT_VERTICAL_FOV = 60.0  # degrees
DEFAULT_MIN_DISTANCE = 0.5  # metres, near clipping plane
DEFAULT_MAX_DISTANCE = 5.0  # metres, far clipping plane

FRONTIER_COLOR_ALPHA = 0.5  # Alpha of the per-cluster display colour

VOXEL_KEY_BITS = 21  # Bits per axis in a packed voxel key
DEFAULT_VOXEL_SIZE = 0.2  # metres

CAMERA_SECTION = "camera"


def load_app_config(config_path: str = "config.ini"):
    """Load application config from an INI file."""
    import configparser
    parser = configparser.ConfigParser()
    parser.read(config_path)
    return parser


def camera_from_config(parser, section: str = CAMERA_SECTION):
    """Build an initialized ``CameraModel`` from an INI ``[camera]`` section.

    Options missing from the section (or a missing section) fall back to
    the ``DEFAULT_*`` constants above.
    """
    from nbv.camera_model import CameraModel

    def _get(option, default):
        if parser.has_section(section):
            return parser.getfloat(section, option, fallback=default)
        return default

    camera = CameraModel()
    camera.set_intrinsics_from_fov(
        _get("horizontal_fov", DEFAULT_HORIZONTAL_FOV),
        _get("vertical_fov", DEFAULT_VERTICAL_FOV),
        _get("min_distance", DEFAULT_MIN_DISTANCE),
        _get("max_distance", DEFAULT_MAX_DISTANCE),
    )
    return camera
