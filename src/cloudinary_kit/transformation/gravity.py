"""Gravity qualifier.

Gravity determines which part of an asset to focus on, and thus which part
to keep, when any part of the asset is cropped. Compound modes such as
``custom:face`` are single tokens; this module only renders them; nothing
parses them back.
"""

from ..utils.formatting import TokenEnum


class Gravity(TokenEnum):
    """Closed set of gravity modes.

    The enum value is the bare token; ``str()`` renders the full
    ``g_<token>`` qualifier.

    Examples:
        >>> str(Gravity.NORTH)
        'g_north'
        >>> str(Gravity.CUSTOM_FACE)
        'g_custom:face'
    """

    # Compass directions
    NORTH_EAST = "north_east"
    NORTH = "north"
    NORTH_WEST = "north_west"
    WEST = "west"
    SOUTH_WEST = "south_west"
    SOUTH = "south"
    SOUTH_EAST = "south_east"
    EAST = "east"
    CENTER = "center"

    # Advanced Facial Attribute Detection add-on
    ADV_EYES = "adv_eyes"
    ADV_FACE = "adv_face"
    ADV_FACES = "adv_faces"

    # Custom coordinates, with an optional fallback when none were specified
    CUSTOM = "custom"
    CUSTOM_FACE = "custom:face"
    CUSTOM_ADV_FACE = "custom:adv_face"
    CUSTOM_ADV_FACES = "custom:adv_faces"
    CUSTOM_FACES = "custom:faces"

    # Face detection; defaults to north unless a fallback is given
    FACE = "face"
    FACE_CENTER = "face:center"
    FACE_AUTO = "face:auto"
    FACES = "faces"
    FACES_CENTER = "faces:center"
    FACES_AUTO = "faces:auto"

    # OCR Text Detection and Extraction add-on
    OCR_TEXT = "ocr_text"

    # Automatic region detection
    AUTO_SUBJECT = "auto:subject"
    AUTO_CLASSIC = "auto:classic"

    def __str__(self) -> str:
        return f"g_{self.value}"
