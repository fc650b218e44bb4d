"""
Constants for identifier naming: context vocabularies, domain vocabularies,
scoring weights and generation limits.
"""

# Context vocabularies (ordered: terse profiles keep only the first three)
FUNCTION_PREFIXES = (
    "get", "set", "is", "has", "can", "should", "will", "init", "load", "show",
    "hide", "toggle", "emit", "handle", "process", "validate", "create",
    "update", "delete", "find", "search",
)
FUNCTION_SUFFIXES = (
    "Handler", "Callback", "Event", "Data", "Config", "Options", "State",
    "Element", "Page", "Section",
)

VARIABLE_PREFIXES = (
    "is", "has", "can", "should", "will", "current", "selected", "active",
    "visible", "loading", "temp", "tmp", "cached",
)
VARIABLE_SUFFIXES = (
    "Data", "Config", "Options", "State", "Element", "Container", "Wrapper",
    "Index", "Count", "Total", "Length",
)

CONSTANT_PREFIXES = ("MAX", "MIN", "DEFAULT", "CONFIG", "API", "URL", "PATH")
CONSTANT_SUFFIXES = ("_CONFIG", "_DATA", "_OPTIONS", "_STATE", "_ELEMENT", "_CONTAINER")

CLASS_NAME_PREFIXES = (
    "et-", "page-", "nav-", "content-", "image-", "audio-", "video-", "text-",
    "link-", "button-", "form-", "input-",
)
CLASS_NAME_SUFFIXES = (
    "-container", "-wrapper", "-element", "-component", "-section", "-page",
    "-item", "-list", "-grid",
)

ID_PREFIXES = ("to", "from", "nav", "content", "main", "header", "footer", "sidebar")
ID_SUFFIXES = (
    "Page", "Section", "Container", "Button", "Link", "Image", "Video", "Audio",
    "Form", "Input",
)

PAGE_ID_PREFIXES = ("#",)
PAGE_ID_SUFFIXES = ("-page", "-section")

# Leading character accepted in front of element ids ("#aboutPage")
ANCHOR = "#"

# Domain vocabularies, matched as lower-case substrings of free text
AUDIO_PREFIXES = ("sound", "audio", "music", "track", "beat", "rhythm", "melody", "harmony")
AUDIO_SUFFIXES = ("Player", "Control", "Volume", "Track", "Album", "Playlist")

VISUAL_PREFIXES = ("vision", "visual", "image", "photo", "still", "video", "graphic", "art")
VISUAL_SUFFIXES = ("Gallery", "Carousel", "Viewer", "Display", "Canvas", "Frame")

TEXT_PREFIXES = ("word", "text", "story", "diary", "blog", "poem", "verse", "line")
TEXT_SUFFIXES = ("Editor", "Reader", "Writer", "Content", "Body", "Paragraph")

NAVIGATION_PREFIXES = ("nav", "menu", "link", "button", "back", "forward", "up", "down")
NAVIGATION_SUFFIXES = ("Navigation", "Menu", "Link", "Button", "Control", "Handler")

DOMAIN_MATCH_POINTS = 10

# Keyword fallbacks when no domain vocabulary matches, checked in order
PAGE_KEYWORDS = ("page", "section")
ACTION_KEYWORDS = ("button", "link", "click")
STYLE_KEYWORDS = ("class", "style")

# Quality scoring
READABILITY_WEIGHT = 0.3
CONTEXT_WEIGHT = 0.4
SEMANTIC_WEIGHT = 0.3
NEUTRAL_SCORE = 50
MIN_READABLE_LENGTH = 3
MAX_READABLE_LENGTH = 30
VOWEL_RATIO_RANGE = (0.2, 0.6)

# Generation
DEFAULT_MAX_RESULTS = 10
MAX_CANDIDATES = 500

# Fuzzy matching
DEFAULT_SIMILARITY_THRESHOLD = 70
EXISTING_NAME_THRESHOLD = 60

# Preference adjustments
CASE_MATCH_BONUS = 10
CASE_MISMATCH_PENALTY = 5
ABBREVIATION_PENALTY = 20
MIN_LENGTH_RATIO = 0.7
TERSE_VOCABULARY_SIZE = 3

# Identifiers seen on the site the vocabularies were drawn from; used as the
# corpus when the host supplies none
KNOWN_IDENTIFIERS = (
    "showNewSection", "fadeInPage", "replacePlaceholders", "currentPage",
    "adIsLoaded", "stillsCarousel", "Page", "Carousel", "_pID",
)
