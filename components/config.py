"""
Configuration for page components.

Centralized configuration for hero image class names, image URL conventions
and render mode detection. Settings can be overridden via Django settings
(RETAIL_* variables).
"""

from django.conf import settings

# ==================== Hero Image CSS Classes ====================

# Marker class identifying the hero image component
HERO_BASE_CLASS = getattr(settings, "RETAIL_HERO_BASE_CLASS", "we-HeroImage")

# Modifier classes toggled by component configuration
HERO_FULL_WIDTH_CLASS = getattr(settings, "RETAIL_HERO_FULL_WIDTH_CLASS", "width-full")
HERO_RATIO_CLASS = getattr(settings, "RETAIL_HERO_RATIO_CLASS", "ratio-16by9")

# ==================== Image URL Settings ====================

# Selector and extension of the image rendering servlet (<path>.img.jpeg)
HERO_IMAGE_SELECTOR = getattr(settings, "RETAIL_HERO_IMAGE_SELECTOR", "img")
HERO_IMAGE_EXTENSION = getattr(settings, "RETAIL_HERO_IMAGE_EXTENSION", "jpeg")

# ==================== Render Mode ====================

# Query parameter carrying the render mode (e.g. ?mode=edit)
RENDER_MODE_PARAM = getattr(settings, "RETAIL_RENDER_MODE_PARAM", "mode")

# Render mode used when the request does not name one
DEFAULT_RENDER_MODE = getattr(settings, "RETAIL_DEFAULT_RENDER_MODE", "publish")

# ==================== Component Properties ====================

PROP_FILE_REFERENCE = "fileReference"
PROP_FULL_WIDTH = "useFullWidth"
PROP_KEEP_RATIO = "keepRatio"

PROP_LAST_MODIFIED = "jcr:lastModified"
PROP_CREATED = "jcr:created"

# ==================== Asset Metadata ====================

PROP_JCR_TITLE = "jcr:title"
PROP_DC_TITLE = "dc:title"

# Metadata looked up on the referenced asset
META_KEYS = (
    "dam:Bitsperpixel",
    "dam:MIMEtype",
    "dc:description",
    PROP_DC_TITLE,
    PROP_JCR_TITLE,
    "smp:CreatorTool",
)

# Title sources, highest priority first
TITLE_KEYS = (
    PROP_JCR_TITLE,
    PROP_DC_TITLE,
)

# ==================== Local Content ====================

# Repository content served by the preview views: path -> {"properties", "metadata"}
CONTENT = getattr(settings, "RETAIL_CONTENT", {})
