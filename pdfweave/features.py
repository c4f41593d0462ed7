"""PDF versions and the first version that supports each feature."""

from __future__ import annotations

from enum import Enum


class Version(Enum):
    """A PDF specification version, ordered by release."""

    V1_0 = (1, 0)
    V1_1 = (1, 1)
    V1_2 = (1, 2)
    V1_3 = (1, 3)
    V1_4 = (1, 4)
    V1_5 = (1, 5)
    V1_6 = (1, 6)
    V1_7 = (1, 7)
    V2_2017 = (2, 0)

    def as_bytes(self) -> bytes:
        major, minor = self.value
        return f"{major}.{minor}".encode("ascii")

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.value >= other.value


class Feature(Enum):
    """A capability of the PDF format."""

    TEXT = "Text"
    IMAGES = "Images"
    PAGES = "Pages"
    HYPERTEXT_LINKS = "HypertextLinks"
    BOOKMARKS = "Bookmarks"
    THUMBNAIL_SKETCHES = "ThumbnailSketches"

    RC4_ENCRYPTION_40BIT = "Rc4Encryption40bit"
    LINKS = "Links"
    THREADS = "Threads"
    PASSWORD = "Password"
    DEVICE_INDEPENDENT_COLOR = "DeviceIndependentColor"
    BINARY_FORMAT = "BinaryFormat"

    FORMS = "Forms"
    UNICODE = "Unicode"
    MULTIMEDIA_FEATURES = "MultimediaFeatures"
    OPI13 = "Opi13"
    CMYK_AND_SPOT = "CmykAndSpot"
    EMBEDDED_HALFTONE_FUNCTIONS = "EmbeddedHalftoneFunctions"
    OVERPRINT_INSTRUCTIONS = "OverprintInstructions"

    TWO_BYTE_CID_FONTS = "TwoByteCidFonts"
    OPI20 = "Opi20"
    ADDTL_COLOR_SPACES = "AddtlColorSpaces"
    SMOOTH_SHADING = "SmoothShading"
    ANNOTATIONS = "Annotations"
    DIGITAL_SIGNATURES = "DigitalSignatures"
    JAVASCRIPT_ACTIONS = "JavaScriptActions"
    RC4_ENCRYPTION = "Rc4Encryption"

    TRANSPARENCY = "Transparency"
    JAVASCRIPT15 = "JavaScript15"
    TAGGED_PDF = "TaggedPdf"
    JBIG2_COMPRESSION = "Jbig2Compression"
    RC4_ENCRYPTION_128BIT = "RC4Encryption128bit"

    OBJECT_STREAMS = "ObjectStreams"
    JPEG2000_COMPRESSION = "JPEG2000Compression"
    ENHANCED_XREF_TABLE = "EnhancedXrefTable"
    XREF_STREAMS = "XRefStreams"
    XOBJECT_STREAMS = "XObjectStreams"
    LAYERS = "Layers"
    IMPROVED_TAGGED_PDF = "ImprovedTaggedPdf"
    XML_FORMS_ARCHITECTURE_XFA = "XmlFormsArchitectureXFA"
    ADDITIONAL_TRANSITIONS = "AdditionalTransitions"

    N_CHANNEL = "NChannel"
    AES_ENCRYPTION = "AesEncryption"
    ENHANCED_ANNOTATIONS = "EnhancedAnnotations"
    ENHANCED_TAGGING = "EnhancedTagging"
    OPENTYPE_FONT_DIRECT_EMBEDDING = "OpenTypeFontDirectEmbedding"
    EMBEDDED_FILES = "EmbeddedFiles"
    EMBEDDED_3D_DATA = "Embedded3dData"
    XML_FORMS = "XmlForms"

    IMPROVED_COMMENTING = "ImprovedCommenting"
    IMPROVED_SECURITY = "ImprovedSecurity"
    COMMENTS_IN_3D_OBJECTS = "CommentsIn3dObjects"
    ENHANCED_3D_ANIMATION_CONTROL = "Enhanced3dAnimationControl"
    EMBEDDED_DEFAULT_PRINTER_SETTINGS = "EmbeddedDefaultPrinterSettings"

    def min_version(self) -> Version:
        """The earliest PDF version that supports this feature."""
        return _MIN_VERSIONS[self]


_MIN_VERSIONS: dict[Feature, Version] = {
    feature: version
    for version, features in {
        Version.V1_0: (
            Feature.TEXT,
            Feature.IMAGES,
            Feature.PAGES,
            Feature.HYPERTEXT_LINKS,
            Feature.BOOKMARKS,
            Feature.THUMBNAIL_SKETCHES,
        ),
        Version.V1_1: (
            Feature.RC4_ENCRYPTION_40BIT,
            Feature.LINKS,
            Feature.THREADS,
            Feature.PASSWORD,
            Feature.DEVICE_INDEPENDENT_COLOR,
            Feature.BINARY_FORMAT,
        ),
        Version.V1_2: (
            Feature.FORMS,
            Feature.UNICODE,
            Feature.MULTIMEDIA_FEATURES,
            Feature.OPI13,
            Feature.CMYK_AND_SPOT,
            Feature.EMBEDDED_HALFTONE_FUNCTIONS,
            Feature.OVERPRINT_INSTRUCTIONS,
        ),
        Version.V1_3: (
            Feature.TWO_BYTE_CID_FONTS,
            Feature.OPI20,
            Feature.ADDTL_COLOR_SPACES,
            Feature.SMOOTH_SHADING,
            Feature.ANNOTATIONS,
            Feature.DIGITAL_SIGNATURES,
            Feature.JAVASCRIPT_ACTIONS,
            Feature.RC4_ENCRYPTION,
        ),
        Version.V1_4: (
            Feature.TRANSPARENCY,
            Feature.JAVASCRIPT15,
            Feature.TAGGED_PDF,
            Feature.JBIG2_COMPRESSION,
            Feature.RC4_ENCRYPTION_128BIT,
        ),
        Version.V1_5: (
            Feature.OBJECT_STREAMS,
            Feature.JPEG2000_COMPRESSION,
            Feature.ENHANCED_XREF_TABLE,
            Feature.XREF_STREAMS,
            Feature.XOBJECT_STREAMS,
            Feature.LAYERS,
            Feature.IMPROVED_TAGGED_PDF,
            Feature.XML_FORMS_ARCHITECTURE_XFA,
            Feature.ADDITIONAL_TRANSITIONS,
        ),
        Version.V1_6: (
            Feature.N_CHANNEL,
            Feature.AES_ENCRYPTION,
            Feature.ENHANCED_ANNOTATIONS,
            Feature.ENHANCED_TAGGING,
            Feature.OPENTYPE_FONT_DIRECT_EMBEDDING,
            Feature.EMBEDDED_FILES,
            Feature.EMBEDDED_3D_DATA,
            Feature.XML_FORMS,
        ),
        Version.V1_7: (
            Feature.IMPROVED_COMMENTING,
            Feature.IMPROVED_SECURITY,
            Feature.COMMENTS_IN_3D_OBJECTS,
            Feature.ENHANCED_3D_ANIMATION_CONTROL,
            Feature.EMBEDDED_DEFAULT_PRINTER_SETTINGS,
        ),
    }.items()
    for feature in features
}