"""Domain enums for embedart.

This module contains the enums describing image roles, output formats and
the closed set of media item variants the providers reason about.
"""

from enum import Enum


class ImageRole(Enum):
    """Semantic purpose of a requested piece of artwork."""

    PRIMARY = "primary"  # Poster / cover
    BACKDROP = "backdrop"  # Fanart / background
    LOGO = "logo"  # Clear logo


class ImageFormat(Enum):
    """Format of an extracted image file."""

    BMP = "bmp"
    GIF = "gif"
    JPG = "jpg"
    PNG = "png"
    WEBP = "webp"


class VideoType(Enum):
    """Physical layout of a video item on disk."""

    VIDEO_FILE = "video_file"
    ISO = "iso"
    DVD = "dvd"  # VIDEO_TS folder structure
    BLURAY = "bluray"  # BDMV folder structure


class IsoType(Enum):
    """Disc layout contained in an ISO image."""

    DVD = "dvd"
    BLURAY = "bluray"


class MediaProtocol(Enum):
    """Protocol used to reach an item's path."""

    FILE = "file"
    HTTP = "http"
    RTMP = "rtmp"
    RTSP = "rtsp"
    UDP = "udp"
    RTP = "rtp"
    FTP = "ftp"


class MediaKind(Enum):
    """Closed set of library item variants.

    Only the video kinds are subjects for embedded image extraction;
    episodes are further restricted to the primary role.
    """

    MOVIE = "movie"
    EPISODE = "episode"
    MUSIC_VIDEO = "music_video"
    VIDEO = "video"
    TRAILER = "trailer"
    AUDIO = "audio"
    PHOTO = "photo"
    FOLDER = "folder"


VIDEO_KINDS: frozenset[MediaKind] = frozenset(
    {
        MediaKind.MOVIE,
        MediaKind.EPISODE,
        MediaKind.MUSIC_VIDEO,
        MediaKind.VIDEO,
        MediaKind.TRAILER,
    }
)
