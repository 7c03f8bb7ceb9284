"""Core enumerations shared by the decoder, the runtime and the models.

Architecture:
    This module defines the configuration enums that steer decoding and
    pagination, plus every enumeration mirrored from the remote schema.

Design Decisions:
    - Integer enums for wire values the remote encodes as numbers
    - Every response-side enum reserves ``UNKNOWN = 255`` so lenient decoding
      has a sentinel to fall back on
    - String enums for values sent as text (sort order, compatibility mode)

Key Types:
    - CompatibilityMode: How unknown fields and enum variants are handled
    - ViolationPolicy: What to do when a page descriptor contradicts the request
    - CoreStatus / CoreApiStatus: Game publication state
    - ProjectStatus: Mod moderation state
    - FileReleaseType / FileStatus / FileRelationType / HashAlgorithm: File metadata
    - ModLoaderType: Loader a file targets
    - SearchSort / SortOrder: Search request options
"""

from enum import Enum, IntEnum

# Value of the reserved UNKNOWN member on every response-side enum
UNKNOWN_VARIANT = 255


class CompatibilityMode(str, Enum):
    """Policy applied to payload content the local schema does not know.

    - STRICT: unknown fields and unknown enum variants are decode errors
    - LENIENT: unknown fields are kept in ``other_fields``, unknown enum
      variants decode to ``UNKNOWN``
    - IGNORE: unknown fields are dropped, unknown enum variants are errors
    """

    STRICT = "strict"
    LENIENT = "lenient"
    IGNORE = "ignore"


class ViolationPolicy(str, Enum):
    """Reaction to a pagination descriptor inconsistent with its request."""

    RAISE = "raise"
    WARN = "warn"

    @classmethod
    def for_mode(cls, mode: CompatibilityMode) -> "ViolationPolicy":
        """Default policy for a compatibility mode (warn only when lenient)."""
        if mode == CompatibilityMode.LENIENT:
            return cls.WARN
        return cls.RAISE


class CoreStatus(IntEnum):
    """<https://docs.curseforge.com/#tocS_CoreStatus>"""

    DRAFT = 1
    TEST = 2
    PENDING_REVIEW = 3
    REJECTED = 4
    APPROVED = 5
    LIVE = 6
    UNKNOWN = UNKNOWN_VARIANT


class CoreApiStatus(IntEnum):
    """<https://docs.curseforge.com/#tocS_CoreApiStatus>"""

    PRIVATE = 1
    PUBLIC = 2
    UNKNOWN = UNKNOWN_VARIANT


class ProjectStatus(IntEnum):
    """<https://docs.curseforge.com/#tocS_ModStatus>"""

    NEW = 1
    CHANGES_REQUIRED = 2
    UNDER_SOFT_REVIEW = 3
    APPROVED = 4
    REJECTED = 5
    CHANGES_MADE = 6
    INACTIVE = 7
    ABANDONED = 8
    DELETED = 9
    UNDER_REVIEW = 10
    UNKNOWN = UNKNOWN_VARIANT


class FileReleaseType(IntEnum):
    """<https://docs.curseforge.com/#tocS_FileReleaseType>"""

    RELEASE = 1
    BETA = 2
    ALPHA = 3
    UNKNOWN = UNKNOWN_VARIANT


class FileStatus(IntEnum):
    """<https://docs.curseforge.com/#tocS_FileStatus>"""

    PROCESSING = 1
    CHANGES_REQUIRED = 2
    UNDER_REVIEW = 3
    APPROVED = 4
    REJECTED = 5
    MALWARE_DETECTED = 6
    DELETED = 7
    ARCHIVED = 8
    TESTING = 9
    RELEASED = 10
    READY_FOR_REVIEW = 11
    DEPRECATED = 12
    BAKING = 13
    AWAITING_PUBLISHING = 14
    FAILED_PUBLISHING = 15
    UNKNOWN = UNKNOWN_VARIANT


class HashAlgorithm(IntEnum):
    """<https://docs.curseforge.com/#tocS_HashAlgo>"""

    SHA1 = 1
    MD5 = 2
    UNKNOWN = UNKNOWN_VARIANT


class FileRelationType(IntEnum):
    """<https://docs.curseforge.com/#tocS_FileRelationType>"""

    EMBEDDED_LIBRARY = 1
    OPTIONAL_DEPENDENCY = 2
    REQUIRED_DEPENDENCY = 3
    TOOL = 4
    INCOMPATIBLE = 5
    INCLUDE = 6
    UNKNOWN = UNKNOWN_VARIANT


class ModLoaderType(IntEnum):
    """<https://docs.curseforge.com/#tocS_ModLoaderType>"""

    ANY = 0
    FORGE = 1
    CAULDRON = 2
    LITE_LOADER = 3
    FABRIC = 4
    UNKNOWN = UNKNOWN_VARIANT


class SearchSort(IntEnum):
    """<https://docs.curseforge.com/#tocS_ModsSearchSortField>"""

    FEATURED = 1
    POPULARITY = 2
    LAST_UPDATED = 3
    NAME = 4
    AUTHOR = 5
    TOTAL_DOWNLOADS = 6
    CATEGORY = 7
    GAME_VERSION = 8


class SortOrder(str, Enum):
    """<https://docs.curseforge.com/#tocS_SortOrder>"""

    ASCENDING = "asc"
    DESCENDING = "desc"
