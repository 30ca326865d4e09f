"""Release metadata fields offered by the condition builder.

Fields label a condition for display. They carry common preset values
for quick entry but play no part in the generated pattern.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class FieldInfo:
    """A selectable release metadata field."""

    key: str
    label: str
    description: str


FIELDS: tuple[FieldInfo, ...] = (
    FieldInfo("releaseTitle", "Release Name", "Full release/file name"),
    FieldInfo("source", "Source", "BluRay, WEB-DL, HDTV, etc."),
    FieldInfo("resolution", "Resolution", "720p, 1080p, 2160p, etc."),
    FieldInfo("hdr", "HDR Format", "HDR10, DV, HDR10+, HLG"),
    FieldInfo("audio", "Audio Codec", "DTS-HD, TrueHD, FLAC, AAC, etc."),
    FieldInfo("videoCodec", "Video Codec", "x264, x265, HEVC, AVC, etc."),
    FieldInfo("releaseGroup", "Release Group", "FraMeSToR, NTb, etc."),
    FieldInfo("edition", "Edition", "Director's Cut, Extended, etc."),
)

_FIELDS_BY_KEY = {info.key: info for info in FIELDS}

# Preset values are regex-ready, mostly for use with the "matches" operator
FIELD_PRESETS: dict[str, tuple[str, ...]] = {
    "resolution": ("720p", "1080p", "2160p", "4320p", "480p", "576p"),
    "hdr": ("HDR10", "HDR10Plus", r"HDR10\+", "Dolby.?Vision", r"\bDV\b", "HLG"),
    "source": ("BluRay", "WEB-DL", "WEBRip", "HDTV", "REMUX", "DVD", "BR-DISK"),
    "audio": (
        r"DTS-HD\.MA",
        "TrueHD",
        "FLAC",
        "AAC",
        r"DD\+",
        "EAC3",
        "Atmos",
        "DTS-X",
    ),
    "videoCodec": (
        "x264",
        "x265",
        "HEVC",
        "AVC",
        r"H\.264",
        r"H\.265",
        "VP9",
        "AV1",
    ),
    "edition": (
        "Director.*Cut",
        "Extended",
        "Unrated",
        "IMAX",
        "Remastered",
        "Theatrical",
    ),
}


def get_field(key: str) -> FieldInfo | None:
    """Look up a field by key, or None if it is not in the catalog."""
    return _FIELDS_BY_KEY.get(key)


def is_known_field(key: str) -> bool:
    return key in _FIELDS_BY_KEY


def field_presets(key: str) -> tuple[str, ...]:
    """Preset values for a field; empty for fields without presets."""
    return FIELD_PRESETS.get(key, ())
